"""
SalesDesk API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db:          AsyncMock standing in for Database (service tests)
    ├── database:         real Database on a throw-away SQLite file, seeded
    ├── empty_database:   Database on a SQLite file with no tables
    ├── unreachable_database: Database whose file cannot be opened
    ├── test_client:      HTTPX AsyncClient bound to the app + `database`
    ├── broken_client / unreachable_client: same, bound to the failing databases
    ├── crashing_client:  same, bound to a mock that raises RuntimeError
    ├── sample_customer:  valid create payload
    ├── seeded_orders:    the ORDERS rows, for computing expectations
    └── seed data helpers (AGENTS, CUSTOMERS, ORDERS)
"""

import os

# Override settings for testing BEFORE any salesdesk imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./salesdesk_test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert

from salesdesk.database import Base, Database, get_database
from salesdesk.models import Agent, Customer, Order


# ══════════════════════════════════════════════════════════════════════════
# Seed Data
# ══════════════════════════════════════════════════════════════════════════

AGENTS = [
    {"AGENT_CODE": "A003", "AGENT_NAME": "Alex", "WORKING_AREA": "London",
     "COMMISSION": 0.13, "PHONE_NO": "075-12458969", "COUNTRY": "UK"},
    {"AGENT_CODE": "A001", "AGENT_NAME": "Subbarao", "WORKING_AREA": "Bangalore",
     "COMMISSION": 0.14, "PHONE_NO": "077-12346674", "COUNTRY": "India"},
    {"AGENT_CODE": "A002", "AGENT_NAME": "Mukesh", "WORKING_AREA": "Mumbai",
     "COMMISSION": 0.11, "PHONE_NO": "029-12358964", "COUNTRY": "India"},
]

CUSTOMERS = [
    {"CUST_CODE": "C00013", "CUST_NAME": "Holmes", "CUST_CITY": "London",
     "WORKING_AREA": "London", "CUST_COUNTRY": "UK", "GRADE": 2,
     "OPENING_AMT": 6000.0, "RECEIVE_AMT": 5000.0, "PAYMENT_AMT": 7000.0,
     "OUTSTANDING_AMT": 4000.0, "PHONE_NO": "BBBBBBB", "AGENT_CODE": "A003"},
    {"CUST_CODE": "C00001", "CUST_NAME": "Micheal", "CUST_CITY": "New York",
     "WORKING_AREA": "New York", "CUST_COUNTRY": "USA", "GRADE": 2,
     "OPENING_AMT": 3000.0, "RECEIVE_AMT": 5000.0, "PAYMENT_AMT": 2000.0,
     "OUTSTANDING_AMT": 6000.0, "PHONE_NO": "CCCCCCC", "AGENT_CODE": "A001"},
]

START_DATE = date(2008, 1, 1)


def build_orders():
    """
    60 orders for C00001/A001 (more than the 50-row cap), plus a few that
    differ in one of the two codes. Dates repeat so ties are broken by
    ORD_NUM.
    """
    orders = []
    for i in range(60):
        orders.append({
            "ORD_NUM": 200100 + i,
            "ORD_AMOUNT": 1000.0 + i,
            "ADVANCE_AMOUNT": 100.0,
            "ORD_DATE": START_DATE + timedelta(days=i // 2),
            "CUST_CODE": "C00001",
            "AGENT_CODE": "A001",
            "ORD_DESCRIPTION": "SOD",
        })
    orders.append({
        "ORD_NUM": 200500, "ORD_AMOUNT": 500.0, "ADVANCE_AMOUNT": 0.0,
        "ORD_DATE": date(2009, 6, 1), "CUST_CODE": "C00001", "AGENT_CODE": "A002",
        "ORD_DESCRIPTION": "SOD",
    })
    orders.append({
        "ORD_NUM": 200501, "ORD_AMOUNT": 700.0, "ADVANCE_AMOUNT": 0.0,
        "ORD_DATE": date(2009, 6, 2), "CUST_CODE": "C00013", "AGENT_CODE": "A001",
        "ORD_DESCRIPTION": "SOD",
    })
    return orders


ORDERS = build_orders()


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db():
    """
    Provides a mock Database.

    Usage:
        mock_db.fetch_one.return_value = {"CUST_CODE": "C00001"}
        await customer_service.get_customer(mock_db, "c00001")
    """
    db = AsyncMock(spec=Database)
    db.fetch_all = AsyncMock(return_value=[])
    db.fetch_one = AsyncMock(return_value=None)
    db.execute = AsyncMock(return_value=1)
    return db


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    Provides a real Database on a SQLite file with the three tables seeded.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'sample.db'}", pool_size=5, pool_timeout=5)
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(Agent.__table__), AGENTS)
        await conn.execute(insert(Customer.__table__), CUSTOMERS)
        await conn.execute(insert(Order.__table__), ORDERS)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def empty_database(tmp_path):
    """Provides a Database whose tables do not exist (every query fails)."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}", pool_size=2, pool_timeout=1)
    yield db
    await db.dispose()


def _client_for(db: Database, raise_app_exceptions: bool = True):
    from salesdesk.main import app

    app.dependency_overrides[get_database] = lambda: db
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client talking to the app over ASGI, with
    the Database dependency pointed at the seeded SQLite database.

    Usage:
        async def test_agents(test_client):
            response = await test_client.get("/api/agents")
            assert response.status_code == 200
    """
    app, client = _client_for(database)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(empty_database):
    """HTTP client whose Database has no tables."""
    app, client = _client_for(empty_database)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_customer():
    """A valid, not-yet-existing customer payload."""
    return {
        "CUST_CODE": "C00100",
        "CUST_NAME": "Acme Corp",
        "CUST_CITY": "Charlotte",
        "WORKING_AREA": "South",
        "CUST_COUNTRY": "USA",
        "GRADE": 2,
        "OPENING_AMT": 1000.5,
        "RECEIVE_AMT": 200.0,
        "PAYMENT_AMT": 50.0,
        "OUTSTANDING_AMT": 1150.5,
        "PHONE_NO": "555-123-4567",
        "AGENT_CODE": "A001",
    }


@pytest.fixture
def seeded_orders():
    """The order rows loaded by the `database` fixture."""
    return list(ORDERS)


@pytest_asyncio.fixture
async def unreachable_database(tmp_path):
    """Provides a Database whose file cannot be opened (every checkout fails)."""
    db = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nowhere.db'}", pool_size=2, pool_timeout=1
    )
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def unreachable_client(unreachable_database):
    """HTTP client whose Database cannot connect at all."""
    app, client = _client_for(unreachable_database)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def crashing_client(mock_db):
    """
    HTTP client whose Database raises a plain RuntimeError, so requests end
    in the catch-all handler. App exceptions are not re-raised into the test.
    """
    mock_db.fetch_all.side_effect = RuntimeError("driver exploded")
    mock_db.fetch_one.side_effect = RuntimeError("driver exploded")
    app, client = _client_for(mock_db, raise_app_exceptions=False)
    async with client:
        yield client
    app.dependency_overrides.clear()
