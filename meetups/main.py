"""FastAPI application entrypoint for the meetups API."""

import logging

from fastapi import FastAPI

from meetups.api.enrollments import router as enrollments_router
from meetups.api.meetups import router as meetups_router
from meetups.core.config import get_settings
from meetups.core.errors import register_error_handlers
from meetups.core.logging import configure_logging
from meetups.db import models as _models  # noqa: F401
from meetups.security.entry_point import register_authentication_entry_point

settings = get_settings()
configure_logging(settings.log_level)
logging.getLogger(__name__).info("Starting meetups API with settings=%s", settings.safe_for_logging())

app = FastAPI(title="Meetups")
register_error_handlers(app)
register_authentication_entry_point(app)
app.include_router(meetups_router)
app.include_router(enrollments_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint for service readiness."""
    return {"status": "ok"}
