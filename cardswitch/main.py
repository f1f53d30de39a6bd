"""
Card switch mock - FastAPI application.

Exposes the ISO 8583 authorization (0100/0110) and reversal (0400/0410) flows
over JSON.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardswitch.config import settings
from cardswitch.ledger import build_ledger
from cardswitch.routers import iso
from cardswitch.schemas.responses import HealthResponse
from cardswitch.services.processor import TransactionProcessor


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One ledger per process, handed to the processor
    ledger = build_ledger(settings)
    app.state.processor = TransactionProcessor(ledger)
    logger.info("Ledger backend: %s", ledger.backend_name)
    logger.info("Endpoints: POST /authorize (MTI 0100), POST /reversal (MTI 0400)")
    yield
    logger.info("Shutting down %s", settings.service_name)


app = FastAPI(
    title="Card Switch Mock API",
    description="Mock ISO 8583 authorization and reversal flows",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok", service=settings.service_name)


app.include_router(iso.router, tags=["iso8583"])
