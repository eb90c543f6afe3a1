# errors.py
import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from utils import create_failure_alert

log = logging.getLogger("trivia.errors")


class BadRequestAlertError(Exception):
    """Client error that is reported back with an X-<app>-error header."""

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class NotFoundError(HTTPException):
    def __init__(self, entity: str, entity_id):
        super().__init__(status_code=404, detail=f"{entity} {entity_id} not found")


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertError) -> JSONResponse:
    log.warning("Bad request on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=400,
        content={
            "title": exc.message,
            "status": 400,
            "message": f"error.{exc.error_key}",
            "entityName": exc.entity_name,
            "errorKey": exc.error_key,
        },
        headers=create_failure_alert(exc.entity_name, exc.error_key),
    )
