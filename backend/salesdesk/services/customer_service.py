"""
SalesDesk API — Customer Service
=================================

What:  Business logic for the customer endpoints (list, get, create,
       replace, patch, delete).
How:   Normalize/validate with services.customer_payload, then issue one
       parameterized statement per step through the injected Database.
Who:   Called by routes/customers.py.

Flow per write endpoint:
    ┌───────────┐    ┌───────────┐    ┌───────────┐    ┌───────────┐
    │ Normalize │───▶│ Validate  │───▶│ Existence │───▶│  Write +  │
    │           │    │ (400)     │    │ (404/409) │    │  Re-read  │
    └───────────┘    └───────────┘    └───────────┘    └───────────┘

Concurrency Note:
    The existence check and the write are two separate statements on two
    separate pool checkouts. Two concurrent creates of the same new code can
    both pass the check; the loser then fails on the primary key and
    surfaces as a DatabaseError (500), not a ConflictError.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import delete, insert, select, update

from salesdesk.database import Database
from salesdesk.exceptions import BadRequestError, ConflictError, NotFoundError, ValidationError
from salesdesk.models import Customer
from salesdesk.services.customer_payload import (
    CUSTOMER_FIELDS,
    MUTABLE_FIELDS,
    extract_changes,
    full_row,
    normalize_customer,
    validate_customer,
)

logger = logging.getLogger(__name__)

LIST_LIMIT = 50

# Core table behind the Customer model; statements run on plain connections
customer_table = Customer.__table__

SUMMARY_COLUMNS = tuple(
    customer_table.c[name]
    for name in ("CUST_CODE", "CUST_NAME", "CUST_CITY", "WORKING_AREA", "CUST_COUNTRY", "GRADE")
)

DETAIL_COLUMNS = tuple(customer_table.c[name] for name in CUSTOMER_FIELDS)

# Field name → column; partial updates are built only from this mapping
UPDATABLE_COLUMNS = {name: customer_table.c[name] for name in MUTABLE_FIELDS}


def normalize_code(code: Any) -> str:
    """Path codes are matched upper-cased."""
    return str(code or "").upper()


class CustomerService:
    """
    Stateless customer operations; the Database is passed to every call.

    Error Handling Strategy:
        ValidationError / BadRequestError → 400
        NotFoundError                     → 404
        ConflictError                     → 409
        DatabaseError propagates from the Database helpers → 500
    """

    async def list_customers(self, db: Database) -> List[Dict[str, Any]]:
        """First 50 customers by name, summary columns only."""
        stmt = select(*SUMMARY_COLUMNS).order_by(customer_table.c.CUST_NAME).limit(LIST_LIMIT)
        return await db.fetch_all(stmt)

    async def get_customer(self, db: Database, code: str) -> Dict[str, Any]:
        """
        Full row for one customer.

        Raises:
            NotFoundError: No row for the (upper-cased) code
        """
        code = normalize_code(code)
        row = await self._fetch_detail(db, code)
        if row is None:
            raise NotFoundError(resource="customer", resource_id=code)
        return row

    async def create_customer(self, db: Database, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        POST workflow: normalize → validate → conflict check → insert → re-read.

        Raises:
            ValidationError: Payload violations (→ 400)
            ConflictError:   CUST_CODE already taken (→ 409)
        """
        data = normalize_customer(payload)
        self._raise_for_errors(validate_customer(data, partial=False))

        code = data["CUST_CODE"]
        if await self._exists(db, code):
            raise ConflictError(context={"cust_code": code})

        await db.execute(insert(customer_table).values(**full_row(data)))
        logger.info("Customer %s created", code)
        return await self._fetch_detail(db, code)

    async def replace_customer(
        self, db: Database, code: str, payload: Mapping[str, Any]
    ) -> Tuple[Dict[str, Any], bool]:
        """
        PUT workflow: the path code wins over any body code.

        Returns:
            (row, created) where created is True when no row existed and
            one was inserted, False when an existing row was overwritten.

        Raises:
            ValidationError: Payload violations (→ 400)
        """
        code = normalize_code(code)
        data = normalize_customer({**payload, "CUST_CODE": code})
        self._raise_for_errors(validate_customer(data, partial=False))
        code = data["CUST_CODE"]

        row = full_row(data, code=code)
        if await self._exists(db, code):
            values = {name: row[name] for name in MUTABLE_FIELDS}
            await db.execute(
                update(customer_table).where(customer_table.c.CUST_CODE == code).values(**values)
            )
            logger.info("Customer %s replaced", code)
            created = False
        else:
            await db.execute(insert(customer_table).values(**row))
            logger.info("Customer %s created via replace", code)
            created = True

        return await self._fetch_detail(db, code), created

    async def patch_customer(
        self, db: Database, code: str, payload: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        PATCH workflow: existence → filter to mutable fields → partial
        validation → one UPDATE of just the supplied columns.

        Raises:
            NotFoundError:   No row for the code (→ 404)
            BadRequestError: No recognized field left after filtering (→ 400)
            ValidationError: Violations in the supplied fields (→ 400)
        """
        code = normalize_code(code)
        if not await self._exists(db, code):
            raise NotFoundError(resource="customer", resource_id=code)

        changes = extract_changes(normalize_customer(payload))
        if not changes:
            raise BadRequestError(
                message="No valid fields to update",
                context={"ignored": changes.ignored},
            )
        self._raise_for_errors(validate_customer(changes.values, partial=True))

        assignments = {UPDATABLE_COLUMNS[name]: value for name, value in changes.values.items()}
        await db.execute(
            update(customer_table).where(customer_table.c.CUST_CODE == code).values(assignments)
        )
        logger.info("Customer %s patched: %s", code, ", ".join(changes.values))
        return await self._fetch_detail(db, code)

    async def delete_customer(self, db: Database, code: str) -> None:
        """
        Raises:
            NotFoundError: No row for the code (→ 404)
        """
        code = normalize_code(code)
        if not await self._exists(db, code):
            raise NotFoundError(resource="customer", resource_id=code)
        await db.execute(delete(customer_table).where(customer_table.c.CUST_CODE == code))
        logger.info("Customer %s deleted", code)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _exists(self, db: Database, code: str) -> bool:
        stmt = select(customer_table.c.CUST_CODE).where(customer_table.c.CUST_CODE == code).limit(1)
        return await db.fetch_one(stmt) is not None

    async def _fetch_detail(self, db: Database, code: str) -> Optional[Dict[str, Any]]:
        stmt = select(*DETAIL_COLUMNS).where(customer_table.c.CUST_CODE == code).limit(1)
        return await db.fetch_one(stmt)

    @staticmethod
    def _raise_for_errors(errors: List[str]) -> None:
        if errors:
            raise ValidationError(errors)


# ── Singleton Instance ────────────────────────────────────────────────────
customer_service = CustomerService()
