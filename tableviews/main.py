# File: /tableviews/main.py | Version: 1.0 | Title: FastAPI App (store schema + default table on startup)
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tableviews import __version__
from tableviews.core.config import settings
from tableviews.core.logging import configure_logging
from tableviews.crud.tables import seed_default_table
from tableviews.db import Base, SessionLocal, engine
from tableviews.routers import field_types, fields, health, records, tables, views

configure_logging()
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEFAULT_TABLE:
        with SessionLocal() as db:
            seed_default_table(db)
    log.info("Table store ready (%s)", settings.DATABASE_URL)
    yield


app = FastAPI(title="Table Views API", version=__version__, lifespan=lifespan)

app.include_router(health.router)
app.include_router(field_types.router)
app.include_router(tables.router)
app.include_router(fields.router)
app.include_router(records.router)
app.include_router(views.router)

# Optional standardized error responses
if getattr(settings, "ENABLE_STD_ERRORS", False):
    from tableviews.core.error_handlers import register_exception_handlers

    register_exception_handlers(app)
