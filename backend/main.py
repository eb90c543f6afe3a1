# main.py
from typing import List

from fastapi import Depends, FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import CORS_ORIGINS
from db import Base, engine
import models, schemas
from deps import question_store, trivia_service, trivia_store
from errors import BadRequestAlertError, NotFoundError, bad_request_alert_handler
from logging_config import RequestLogger, configure_logging, request_logger
from pagination import PageRequest, page_request, pagination_headers
from resources import router as resources_router
from services import TriviaService
from stores import QuestionStore, TriviaStore
from utils import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)

ENTITY_NAME = "trivia"

configure_logging()

# -----------------------------------------------------------------------------
# App & CORS
# -----------------------------------------------------------------------------
app = FastAPI(title="Trivia API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Link", "X-Total-Count", "Location"],
)

app.add_exception_handler(BadRequestAlertError, bad_request_alert_handler)
app.include_router(resources_router, prefix="/api")

# Create tables at startup
Base.metadata.create_all(bind=engine)

# -----------------------------------------------------------------------------
# Health
# -----------------------------------------------------------------------------
@app.get("/api/health")
def health():
    return {"status": "ok"}

# -----------------------------------------------------------------------------
# Trivias
# -----------------------------------------------------------------------------
def _to_trivia(payload: schemas.TriviaIn, questions: QuestionStore) -> models.Trivia:
    ids = sorted({q.id for q in payload.questions})
    linked = questions.find_by_ids(ids)
    if len(linked) != len(ids):
        missing = sorted(set(ids) - {q.id for q in linked})
        raise BadRequestAlertError(f"Unknown question(s): {missing}", ENTITY_NAME, "questionnotfound")
    return models.Trivia(
        id=payload.id,
        start=payload.start,
        duration=payload.duration,
        level=payload.level,
        questions=linked,
    )

@app.post("/api/trivias", response_model=schemas.TriviaOut, status_code=201)
def create_trivia(
    payload: schemas.TriviaIn,
    response: Response,
    trivias: TriviaStore = Depends(trivia_store),
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to save Trivia : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertError("A new trivia cannot already have an ID", ENTITY_NAME, "idexists")
    result = trivias.save(_to_trivia(payload, questions))
    response.status_code = 201
    response.headers["Location"] = f"/api/trivias/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return schemas.TriviaOut.model_validate(result)

@app.put("/api/trivias", response_model=schemas.TriviaOut)
def update_trivia(
    payload: schemas.TriviaIn,
    response: Response,
    trivias: TriviaStore = Depends(trivia_store),
    questions: QuestionStore = Depends(question_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to update Trivia : %s", payload)
    if payload.id is None:
        return create_trivia(payload, response, trivias, questions, rlog)
    result = trivias.save(_to_trivia(payload, questions))
    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(result.id)))
    return schemas.TriviaOut.model_validate(result)

@app.get("/api/trivias", response_model=List[schemas.TriviaOut])
def get_all_trivias(
    response: Response,
    pageable: PageRequest = Depends(page_request),
    trivias: TriviaStore = Depends(trivia_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get a page of Trivias")
    page = trivias.find_all_paged(pageable)
    response.headers.update(pagination_headers(page, "/api/trivias"))
    return [schemas.TriviaOut.model_validate(t) for t in page.content]

@app.get("/api/trivias/stats/{trivia_id}", response_model=List[schemas.StatRecord])
def get_trivia_stats(
    trivia_id: int,
    service: TriviaService = Depends(trivia_service),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get stats of Trivia : %s", trivia_id)
    return service.compute_stats(trivia_id)

@app.get("/api/trivias/start/{trivia_id}", response_class=PlainTextResponse)
def can_start(
    trivia_id: int,
    service: TriviaService = Depends(trivia_service),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get can start : %s", trivia_id)
    return PlainTextResponse("true" if service.can_start(trivia_id) else "false")

@app.get("/api/trivias/{trivia_id}", response_model=schemas.TriviaOut)
def get_trivia(
    trivia_id: int,
    trivias: TriviaStore = Depends(trivia_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to get Trivia : %s", trivia_id)
    trivia = trivias.find_by_id(trivia_id)
    if trivia is None:
        raise NotFoundError("Trivia", trivia_id)
    return schemas.TriviaOut.model_validate(trivia)

@app.delete("/api/trivias/{trivia_id}")
def delete_trivia(
    trivia_id: int,
    trivias: TriviaStore = Depends(trivia_store),
    rlog: RequestLogger = Depends(request_logger),
):
    rlog.debug("REST request to delete Trivia : %s", trivia_id)
    trivias.delete(trivia_id)
    return Response(status_code=200, headers=create_entity_deletion_alert(ENTITY_NAME, str(trivia_id)))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8080, reload=True)
