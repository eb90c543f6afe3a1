# stores.py
"""
Persistence seams. The API and services only talk to the abstract stores;
the Sql* classes are the SQLAlchemy-backed implementations used at runtime.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session, selectinload

import models
from errors import BadRequestAlertError
from pagination import Page, PageRequest


class Store(ABC):
    @abstractmethod
    def save(self, entity):
        """Insert or update; returns the persisted entity."""

    @abstractmethod
    def find_by_id(self, entity_id: int):
        """Returns the entity or None."""

    @abstractmethod
    def find_all_paged(self, pageable: PageRequest) -> Page:
        ...

    @abstractmethod
    def delete(self, entity_id: int) -> None:
        """Deletes the entity if present. Missing ids are ignored."""


class TriviaStore(Store):
    pass


class QuestionStore(Store):
    @abstractmethod
    def find_by_ids(self, ids: List[int]) -> List[models.Question]:
        ...


class UserStore(Store):
    @abstractmethod
    def find_by_login(self, login: str) -> Optional[models.User]:
        ...


class ClientAnswerStore(Store):
    @abstractmethod
    def find_all(self) -> List[models.ClientAnswer]:
        """Every recorded answer, in recording order."""


# -----------------------------------------------------------------------------
# SQLAlchemy implementations
# -----------------------------------------------------------------------------
class SqlStore(Store):
    model = None
    entity_name = ""
    # wire name -> column attribute name
    sortable: Dict[str, str] = {"id": "id"}

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(self.model)

    def save(self, entity):
        entity = self.db.merge(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int):
        return self._query().filter(self.model.id == entity_id).first()

    def _order_by(self, pageable: PageRequest):
        orders = []
        for prop, direction in pageable.sort:
            column_name = self.sortable.get(prop)
            if column_name is None:
                raise BadRequestAlertError(f"Cannot sort by '{prop}'", self.entity_name, "badsort")
            column = getattr(self.model, column_name)
            orders.append(desc(column) if direction == "desc" else asc(column))
        # stable pages
        orders.append(asc(self.model.id))
        return orders

    def find_all_paged(self, pageable: PageRequest) -> Page:
        total = self.db.query(self.model).count()
        rows = (
            self._query()
            .order_by(*self._order_by(pageable))
            .offset(pageable.offset)
            .limit(pageable.size)
            .all()
        )
        return Page(content=rows, number=pageable.page, size=pageable.size, total_elements=total)

    def delete(self, entity_id: int) -> None:
        row = self.db.query(self.model).filter(self.model.id == entity_id).first()
        if row is not None:
            self.db.delete(row)
            self.db.commit()


class SqlTriviaStore(SqlStore, TriviaStore):
    model = models.Trivia
    entity_name = "trivia"
    sortable = {"id": "id", "start": "start", "duration": "duration", "level": "level"}

    def _query(self):
        return self.db.query(models.Trivia).options(selectinload(models.Trivia.questions))


class SqlQuestionStore(SqlStore, QuestionStore):
    model = models.Question
    entity_name = "question"
    sortable = {
        "id": "id",
        "question": "question",
        "correctAnswer": "correct_answer",
        "correct_answer": "correct_answer",
        "time": "time",
    }

    def find_by_ids(self, ids: List[int]) -> List[models.Question]:
        if not ids:
            return []
        return self.db.query(models.Question).filter(models.Question.id.in_(ids)).all()

    def delete(self, entity_id: int) -> None:
        # Question.trivias is read-only, so unlink from trivias by hand
        self.db.execute(
            models.trivia_question.delete().where(models.trivia_question.c.questions_id == entity_id)
        )
        super().delete(entity_id)
        self.db.commit()


class SqlUserStore(SqlStore, UserStore):
    model = models.User
    entity_name = "user"
    sortable = {"id": "id", "login": "login"}

    def find_by_login(self, login: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.login == login).first()


class SqlClientAnswerStore(SqlStore, ClientAnswerStore):
    model = models.ClientAnswer
    entity_name = "clientAnswer"
    sortable = {"id": "id", "correct": "correct", "time": "time"}

    def _query(self):
        return self.db.query(models.ClientAnswer).options(
            selectinload(models.ClientAnswer.user),
            selectinload(models.ClientAnswer.question).selectinload(models.Question.trivias),
        )

    def find_all(self) -> List[models.ClientAnswer]:
        return self._query().order_by(asc(models.ClientAnswer.id)).all()
