# schemas.py
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

def _to_aware_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class EntityRef(BaseModel):
    """Reference to another row by id, e.g. {"id": 3}."""
    id: int
    class Config:
        from_attributes = True

# --- Users --------------------------------------------------------------------

class UserIn(BaseModel):
    id: Optional[int] = None
    login: str = Field(min_length=1, max_length=100)

class UserOut(BaseModel):
    id: int
    login: str
    class Config:
        from_attributes = True

# --- Questions ----------------------------------------------------------------

class QuestionIn(BaseModel):
    id: Optional[int] = None
    question: str = Field(min_length=1)
    answer1: str = Field(min_length=1, max_length=512)
    answer2: str = Field(min_length=1, max_length=512)
    answer3: str = Field(min_length=1, max_length=512)
    answer4: str = Field(min_length=1, max_length=512)
    correct_answer: int = Field(alias="correctAnswer", ge=1, le=4)
    time: Optional[int] = Field(default=None, ge=0)
    class Config:
        populate_by_name = True

class QuestionOut(BaseModel):
    id: int
    question: str
    answer1: str
    answer2: str
    answer3: str
    answer4: str
    correct_answer: int = Field(alias="correctAnswer")
    time: Optional[int] = None
    class Config:
        from_attributes = True
        populate_by_name = True

# --- Trivias ------------------------------------------------------------------

class TriviaIn(BaseModel):
    id: Optional[int] = None
    start: datetime
    duration: int
    level: int = Field(ge=1, le=10)
    questions: List[EntityRef] = []

    @field_validator("start")
    @classmethod
    def start_as_utc(cls, v: datetime) -> datetime:
        return _to_naive_utc(v)

class TriviaOut(BaseModel):
    id: int
    start: datetime
    duration: int
    level: int
    questions: List[QuestionOut] = []
    class Config:
        from_attributes = True

    @field_validator("start")
    @classmethod
    def start_as_utc(cls, v: datetime) -> datetime:
        return _to_aware_utc(v)

# --- Client answers -----------------------------------------------------------

class ClientAnswerIn(BaseModel):
    id: Optional[int] = None
    correct: bool
    time: int = Field(ge=0)
    question: EntityRef
    user: EntityRef

class ClientAnswerOut(BaseModel):
    id: int
    correct: bool
    time: int
    question: EntityRef
    user: UserOut
    class Config:
        from_attributes = True

# --- Stats --------------------------------------------------------------------

class StatRecord(BaseModel):
    user: UserOut
    answered: int
    correct: int
    incorrect: int
    total_time: int = Field(alias="totalTime")
    average_time: float = Field(alias="averageTime")
    class Config:
        populate_by_name = True
