import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from starflow.api import calendar, commitments, documents, entries, health, stars
from starflow.core.config import settings, validate_config
from starflow.core.errors import (
    AppError,
    app_error_handler,
    http_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from starflow.core.logging import configure_logging
from starflow.core.middleware.request_id import RequestIdMiddleware

configure_logging(settings.ENV)
validate_config(strict=settings.CONFIG_STRICT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("starflow")
    logger.info("Starting Star Flow engine...")
    app.state.startup_time = time.time()
    try:
        yield
    finally:
        logging.getLogger("starflow").info("Stopping Star Flow engine...")


app = FastAPI(title="Star Flow - scoring engine", lifespan=lifespan)

app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(HTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(documents.router)
app.include_router(stars.router)
app.include_router(commitments.router)
app.include_router(entries.router)
app.include_router(calendar.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("starflow.main:app", host="0.0.0.0", port=8000, reload=settings.ENV != "production")
