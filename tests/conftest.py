"""
Shared pytest fixtures for all test modules.

Every test gets a fresh ledger, so no state leaks between tests. The SQL
ledger runs on in-memory SQLite (StaticPool) and is rebuilt per test as well.
"""
import pytest
from fastapi.testclient import TestClient

from cardswitch.ledger.memory import InMemoryLedger
from cardswitch.ledger.sql import SqlLedger
from cardswitch.routers.iso import get_processor
from cardswitch.schemas.requests import AuthorizationRequest, ReversalRequest
from cardswitch.services.processor import TransactionProcessor


VISA_PAN = "4123456789012345"
MASTERCARD_PAN = "5123456789012345"


@pytest.fixture
def ledger():
    """A fresh in-memory ledger."""
    return InMemoryLedger()


@pytest.fixture
def sql_ledger():
    """A fresh SQLAlchemy ledger on in-memory SQLite."""
    return SqlLedger.from_url("sqlite:///:memory:")


@pytest.fixture(params=["memory", "sql"])
def any_ledger(request):
    """Runs the test once per ledger backend."""
    if request.param == "sql":
        return SqlLedger.from_url("sqlite:///:memory:")
    return InMemoryLedger()


@pytest.fixture
def processor(ledger):
    return TransactionProcessor(ledger)


@pytest.fixture
def client(processor):
    """
    FastAPI TestClient with the processor dependency overridden. The client is
    NOT used as a context manager, so the lifespan hook never builds its own
    ledger.
    """
    from cardswitch.main import app

    app.dependency_overrides[get_processor] = lambda: processor
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers, not fixtures, so any test file can import and call them directly.
# ---------------------------------------------------------------------------
def make_auth_request(
    stan: str = "123456",
    pan: str = VISA_PAN,
    mti: str = "0100",
    amount: int = 10000,
    currency: str = "840",
    transaction_datetime: str = "0115102345",
    merchant_id: str = "MERCHANT001",
) -> AuthorizationRequest:
    return AuthorizationRequest(
        mti=mti,
        pan=pan,
        amount=amount,
        currency=currency,
        stan=stan,
        transaction_datetime=transaction_datetime,
        merchant_id=merchant_id,
    )


def make_reversal_request(
    original_stan: str = "123456",
    pan: str = VISA_PAN,
    mti: str = "0400",
    amount: int = 10000,
) -> ReversalRequest:
    return ReversalRequest(mti=mti, original_stan=original_stan, pan=pan, amount=amount)


def auth_body(**overrides) -> dict:
    return make_auth_request(**overrides).model_dump()


def reversal_body(**overrides) -> dict:
    return make_reversal_request(**overrides).model_dump()
