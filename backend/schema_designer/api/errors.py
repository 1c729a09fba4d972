"""Translate service errors into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schema_designer.core.errors import SchemaDesignerError

logger = logging.getLogger(__name__)


async def schema_designer_error_handler(request: Request, exc: SchemaDesignerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)

    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SchemaDesignerError, schema_designer_error_handler)
