# pagination.py
import math
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from fastapi import Query

from config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from errors import BadRequestAlertError

# Largest row offset every supported database accepts
MAX_OFFSET = 2**31 - 1


@dataclass
class PageRequest:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: List[Tuple[str, str]] = field(default_factory=list)  # [(property, "asc"|"desc")]

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page:
    content: List[Any]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)


def parse_sort(values: List[str]) -> List[Tuple[str, str]]:
    """
    Turns ["level,desc", "id"] into [("level", "desc"), ("id", "asc")].
    Anything other than "desc" sorts ascending.
    """
    orders = []
    for raw in values:
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if not parts:
            continue
        direction = "asc"
        if len(parts) > 1 and parts[-1].lower() in ("asc", "desc"):
            direction = parts.pop().lower()
        for prop in parts:
            orders.append((prop, direction))
    return orders


def page_request(
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    sort: List[str] = Query([]),
) -> PageRequest:
    pageable = PageRequest(page=page, size=min(size, MAX_PAGE_SIZE), sort=parse_sort(sort))
    if pageable.offset > MAX_OFFSET:
        raise BadRequestAlertError(f"Page {page} is out of range", "pagination", "badpage")
    return pageable


def _uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?page={page}&size={size}"

def pagination_headers(page: Page, base_url: str) -> dict:
    links = []
    if page.number + 1 < page.total_pages:
        links.append(f'<{_uri(base_url, page.number + 1, page.size)}>; rel="next"')
    if page.number > 0:
        links.append(f'<{_uri(base_url, page.number - 1, page.size)}>; rel="prev"')
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_uri(base_url, 0, page.size)}>; rel="first"')
    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
