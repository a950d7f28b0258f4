from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.apps.invoices.api import router as invoices_router
from src.apps.invoices.exception_handlers import (
    EXCEPTION_HANDLERS as INVOICES_EXCEPTION_HANDLERS,
)
from src.core.config import settings
from src.core.database import db_manager, init_db
from src.core.logging_config import setup_logging

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.storage_backend != "memory":
        await init_db()
    yield
    await db_manager.dispose()


app = FastAPI(
    title="Обработка платежей по счетам",
    lifespan=lifespan,
)

for exc_class, handler in INVOICES_EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(invoices_router, prefix="/api", tags=["invoices"])
