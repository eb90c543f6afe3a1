# resources.py  — questions, client answers and users
from typing import List

from fastapi import APIRouter, Depends, Response

import models, schemas
from deps import client_answer_store, question_store, user_store
from errors import BadRequestAlertError, NotFoundError
from logging_config import RequestLogger, request_logger
from pagination import PageRequest, page_request, pagination_headers
from stores import ClientAnswerStore, QuestionStore, UserStore
from utils import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)

router = APIRouter()


def _created(response: Response, path: str, entity_name: str, entity_id: int) -> None:
    response.status_code = 201
    response.headers["Location"] = f"/api/{path}/{entity_id}"
    response.headers.update(create_entity_creation_alert(entity_name, str(entity_id)))

# -----------------------------------------------------------------------------
# Questions
# -----------------------------------------------------------------------------
QUESTION = "question"

def _to_question(payload: schemas.QuestionIn) -> models.Question:
    return models.Question(id=payload.id, **payload.model_dump(exclude={"id"}))

@router.post("/questions", response_model=schemas.QuestionOut, status_code=201)
def create_question(
    payload: schemas.QuestionIn,
    response: Response,
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to save Question : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertError("A new question cannot already have an ID", QUESTION, "idexists")
    result = questions.save(_to_question(payload))
    _created(response, "questions", QUESTION, result.id)
    return schemas.QuestionOut.model_validate(result)

@router.put("/questions", response_model=schemas.QuestionOut)
def update_question(
    payload: schemas.QuestionIn,
    response: Response,
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to update Question : %s", payload)
    if payload.id is None:
        return create_question(payload, response, questions, rlog)
    result = questions.save(_to_question(payload))
    response.headers.update(create_entity_update_alert(QUESTION, str(result.id)))
    return schemas.QuestionOut.model_validate(result)

@router.get("/questions", response_model=List[schemas.QuestionOut])
def get_all_questions(
    response: Response,
    pageable: PageRequest = Depends(page_request),
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get a page of Questions")
    page = questions.find_all_paged(pageable)
    response.headers.update(pagination_headers(page, "/api/questions"))
    return [schemas.QuestionOut.model_validate(q) for q in page.content]

@router.get("/questions/{question_id}", response_model=schemas.QuestionOut)
def get_question(
    question_id: int,
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get Question : %s", question_id)
    question = questions.find_by_id(question_id)
    if question is None:
        raise NotFoundError("Question", question_id)
    return schemas.QuestionOut.model_validate(question)

@router.delete("/questions/{question_id}")
def delete_question(
    question_id: int,
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to delete Question : %s", question_id)
    questions.delete(question_id)
    return Response(status_code=200, headers=create_entity_deletion_alert(QUESTION, str(question_id)))

# -----------------------------------------------------------------------------
# Client answers
# -----------------------------------------------------------------------------
CLIENT_ANSWER = "clientAnswer"

def _to_client_answer(
    payload: schemas.ClientAnswerIn,
    questions: QuestionStore,
    users: UserStore,
) -> models.ClientAnswer:
    if questions.find_by_id(payload.question.id) is None:
        raise BadRequestAlertError("Answer refers to an unknown question", CLIENT_ANSWER, "questionnotfound")
    if users.find_by_id(payload.user.id) is None:
        raise BadRequestAlertError("Answer refers to an unknown user", CLIENT_ANSWER, "usernotfound")
    return models.ClientAnswer(
        id=payload.id,
        correct=payload.correct,
        time=payload.time,
        question_id=payload.question.id,
        user_id=payload.user.id,
    )

@router.post("/client-answers", response_model=schemas.ClientAnswerOut, status_code=201)
def create_client_answer(
    payload: schemas.ClientAnswerIn,
    response: Response,
    answers: ClientAnswerStore = Depends(client_answer_store),
    questions: QuestionStore = Depends(question_store),
    users: UserStore = Depends(user_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to save ClientAnswer : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertError("A new clientAnswer cannot already have an ID", CLIENT_ANSWER, "idexists")
    result = answers.save(_to_client_answer(payload, questions, users))
    _created(response, "client-answers", CLIENT_ANSWER, result.id)
    return schemas.ClientAnswerOut.model_validate(result)

@router.put("/client-answers", response_model=schemas.ClientAnswerOut)
def update_client_answer(
    payload: schemas.ClientAnswerIn,
    response: Response,
    answers: ClientAnswerStore = Depends(client_answer_store),
    questions: QuestionStore = Depends(question_store),
    users: UserStore = Depends(user_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to update ClientAnswer : %s", payload)
    if payload.id is None:
        return create_client_answer(payload, response, answers, questions, users, rlog)
    result = answers.save(_to_client_answer(payload, questions, users))
    response.headers.update(create_entity_update_alert(CLIENT_ANSWER, str(result.id)))
    return schemas.ClientAnswerOut.model_validate(result)

@router.get("/client-answers", response_model=List[schemas.ClientAnswerOut])
def get_all_client_answers(
    response: Response,
    pageable: PageRequest = Depends(page_request),
    answers: ClientAnswerStore = Depends(client_answer_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get a page of ClientAnswers")
    page = answers.find_all_paged(pageable)
    response.headers.update(pagination_headers(page, "/api/client-answers"))
    return [schemas.ClientAnswerOut.model_validate(a) for a in page.content]

@router.get("/client-answers/{answer_id}", response_model=schemas.ClientAnswerOut)
def get_client_answer(
    answer_id: int,
    answers: ClientAnswerStore = Depends(client_answer_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get ClientAnswer : %s", answer_id)
    answer = answers.find_by_id(answer_id)
    if answer is None:
        raise NotFoundError("ClientAnswer", answer_id)
    return schemas.ClientAnswerOut.model_validate(answer)

@router.delete("/client-answers/{answer_id}")
def delete_client_answer(
    answer_id: int,
    answers: ClientAnswerStore = Depends(client_answer_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to delete ClientAnswer : %s", answer_id)
    answers.delete(answer_id)
    return Response(status_code=200, headers=create_entity_deletion_alert(CLIENT_ANSWER, str(answer_id)))

# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------
USER = "user"

@router.post("/users", response_model=schemas.UserOut, status_code=201)
def create_user(
    payload: schemas.UserIn,
    response: Response,
    users: UserStore = Depends(user_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to save User : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertError("A new user cannot already have an ID", USER, "idexists")
    if users.find_by_login(payload.login) is not None:
        raise BadRequestAlertError("Login name already used!", USER, "userexists")
    result = users.save(models.User(login=payload.login))
    _created(response, "users", USER, result.id)
    return schemas.UserOut.model_validate(result)

@router.get("/users", response_model=List[schemas.UserOut])
def get_all_users(
    response: Response,
    pageable: PageRequest = Depends(page_request),
    users: UserStore = Depends(user_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get a page of Users")
    page = users.find_all_paged(pageable)
    response.headers.update(pagination_headers(page, "/api/users"))
    return [schemas.UserOut.model_validate(u) for u in page.content]

@router.get("/users/{user_id}", response_model=schemas.UserOut)
def get_user(
    user_id: int,
    users: UserStore = Depends(user_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get User : %s", user_id)
    user = users.find_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return schemas.UserOut.model_validate(user)
