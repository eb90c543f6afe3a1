# deps.py  — FastAPI dependencies wiring stores and services to the request session
from fastapi import Depends
from sqlalchemy.orm import Session

from db import get_db
from logging_config import RequestLogger, request_logger
from services import TriviaService
from stores import (
    ClientAnswerStore, QuestionStore, TriviaStore, UserStore,
    SqlClientAnswerStore, SqlQuestionStore, SqlTriviaStore, SqlUserStore,
)


def trivia_store(db: Session = Depends(get_db)) -> TriviaStore:
    return SqlTriviaStore(db)

def question_store(db: Session = Depends(get_db)) -> QuestionStore:
    return SqlQuestionStore(db)

def user_store(db: Session = Depends(get_db)) -> UserStore:
    return SqlUserStore(db)

def client_answer_store(db: Session = Depends(get_db)) -> ClientAnswerStore:
    return SqlClientAnswerStore(db)

def trivia_service(
    trivias: TriviaStore = Depends(trivia_store),
    answers: ClientAnswerStore = Depends(client_answer_store),
    log: RequestLogger = Depends(request_logger),
) -> TriviaService:
    return TriviaService(trivias, answers, log)
