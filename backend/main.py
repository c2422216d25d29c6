from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from config import CORS_ALLOWED_ORIGINS
from database import Base, engine
from errors import LedgerError, PartialApplicationError, StorageError
from logging_config import setup_logging
import models  # noqa: F401  registers every table on Base.metadata
import routers.invoices as invoices
import routers.items as items
import routers.parties as parties
import routers.payments as payments
import routers.reports as reports

setup_logging()
logger = logging.getLogger(__name__)
logger.info("Application starting up...")

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Ledger API",
    version="1.0.0",
    description="Invoices, stock, party ledgers and outstanding balances",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    if isinstance(exc, PartialApplicationError):
        logger.error(f"Partial application on {request.url.path}: {exc.detail}")
    content = {"detail": exc.detail}
    if isinstance(exc, StorageError):
        content["retryable"] = True
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    # Storage failures surface as 503, never as an empty report
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=StorageError.status_code,
        content={"detail": "Storage is unavailable, please retry", "retryable": True},
    )


app.include_router(parties.router)
app.include_router(items.router)
app.include_router(invoices.router)
app.include_router(payments.router)
app.include_router(reports.router)


@app.get("/")
async def root():
    return {"message": "Ledger API is running"}
