# services.py
from datetime import datetime, timezone
from typing import Iterable, List, Optional

import models
import schemas
from errors import NotFoundError
from stores import ClientAnswerStore, TriviaStore


def answers_for_trivia(answers: Iterable[models.ClientAnswer], trivia_id: int) -> List[models.ClientAnswer]:
    """Answers whose question is linked to the given trivia, order preserved."""
    return [
        a for a in answers
        if any(t.id == trivia_id for t in a.question.trivias)
    ]


def stat_record(answers: List[models.ClientAnswer], user: models.User) -> schemas.StatRecord:
    """Summarise the answers in `answers` that belong to `user`."""
    mine = [a for a in answers if a.user_id == user.id]
    correct = sum(1 for a in mine if a.correct)
    total_time = sum(a.time or 0 for a in mine)
    return schemas.StatRecord(
        user=schemas.UserOut.model_validate(user),
        answered=len(mine),
        correct=correct,
        incorrect=len(mine) - correct,
        total_time=total_time,
        average_time=(total_time / len(mine)) if mine else 0.0,
    )


def build_stat_records(answers: Iterable[models.ClientAnswer], trivia_id: int) -> List[schemas.StatRecord]:
    """
    One record per distinct user who answered a question of the trivia.
    Users appear in the order of their first answer in `answers`.
    """
    scoped = answers_for_trivia(answers, trivia_id)
    records = []
    seen = set()
    for a in scoped:
        if a.user_id in seen:
            continue
        seen.add(a.user_id)
        records.append(stat_record(scoped, a.user))
    return records


def is_started(start: datetime, now: Optional[datetime] = None) -> bool:
    """True when `now` is strictly after `start`. Naive datetimes are UTC."""
    now = now or datetime.now(timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return start < now


class TriviaService:
    def __init__(self, trivias: TriviaStore, answers: ClientAnswerStore, log):
        self.trivias = trivias
        self.answers = answers
        self.log = log

    def compute_stats(self, trivia_id: int) -> List[schemas.StatRecord]:
        records = build_stat_records(self.answers.find_all(), trivia_id)
        self.log.debug("Computed %d stat records for Trivia %s", len(records), trivia_id)
        return records

    def can_start(self, trivia_id: int, now: Optional[datetime] = None) -> bool:
        trivia = self.trivias.find_by_id(trivia_id)
        if trivia is None:
            raise NotFoundError("Trivia", trivia_id)
        return is_started(trivia.start, now)
