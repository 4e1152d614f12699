"""
SalesDesk API — Customer Payload Normalization & Validation
============================================================

What:  Pure functions that clean up and check customer-shaped JSON bodies.
How:   normalize_customer() → validate_customer() → extract_changes() /
       full_row(). None of them touch the database; the same input always
       yields the same output.
Who:   Called by CustomerService before any write.

Field Sets:
    CUSTOMER_FIELDS   All 12 columns, in canonical (table) order
    MUTABLE_FIELDS    Everything except CUST_CODE
    REQUIRED_FIELDS   Must be present and non-empty on create/replace
    MONETARY_FIELDS   Must be finite numbers >= 0 when present

Numeric Coercion:
    GRADE and the monetary fields are converted to numbers when they are
    present, non-null and non-empty. Values that cannot be parsed become
    NaN so that validation reports them with the field's range message.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

CUSTOMER_FIELDS = (
    "CUST_CODE",
    "CUST_NAME",
    "CUST_CITY",
    "WORKING_AREA",
    "CUST_COUNTRY",
    "GRADE",
    "OPENING_AMT",
    "RECEIVE_AMT",
    "PAYMENT_AMT",
    "OUTSTANDING_AMT",
    "PHONE_NO",
    "AGENT_CODE",
)

MUTABLE_FIELDS = tuple(f for f in CUSTOMER_FIELDS if f != "CUST_CODE")

REQUIRED_FIELDS = (
    "CUST_CODE",
    "CUST_NAME",
    "WORKING_AREA",
    "CUST_COUNTRY",
    "OPENING_AMT",
    "RECEIVE_AMT",
    "PAYMENT_AMT",
    "OUTSTANDING_AMT",
    "PHONE_NO",
)

MONETARY_FIELDS = ("OPENING_AMT", "RECEIVE_AMT", "PAYMENT_AMT", "OUTSTANDING_AMT")

NUMERIC_FIELDS = ("GRADE",) + MONETARY_FIELDS

CUST_CODE_PATTERN = re.compile(r"[A-Z0-9]{5,6}")

PHONE_NO_MAX_LENGTH = 17


@dataclass
class CustomerChanges:
    """
    Result of copying permitted fields out of an untyped payload.

    Attributes:
        values:  Permitted fields in canonical order, ready to bind
        ignored: Keys that were dropped because they are not updatable
    """
    values: Dict[str, Any] = field(default_factory=dict)
    ignored: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.values)


def _to_number(value: Any) -> Any:
    """
    Coerce a JSON value to int/float.

    Numbers pass through (NaN stays NaN). Numeric strings are parsed,
    preferring int. Anything else, booleans included, becomes NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return math.nan
    return math.nan


def _is_non_negative_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _is_grade(value: Any) -> bool:
    # GRADE is an INTEGER column: whole, finite, non-negative
    return _is_non_negative_number(value) and float(value).is_integer()


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def normalize_customer(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a cleaned copy of a customer payload.

    - every string value is stripped (recognized field or not)
    - a truthy CUST_CODE is upper-cased
    - GRADE and monetary fields are coerced to numbers when non-empty;
      a whole-valued float GRADE (2.0) becomes an int
    - None and absent fields are left untouched

    Normalizing an already-normalized payload returns an equal payload.

    Example:
        >>> normalize_customer({"CUST_CODE": "c1234 ", "GRADE": "2"})
        {'CUST_CODE': 'C1234', 'GRADE': 2}
    """
    data: Dict[str, Any] = {}
    for key, value in raw.items():
        data[key] = value.strip() if isinstance(value, str) else value

    if data.get("CUST_CODE"):
        data["CUST_CODE"] = str(data["CUST_CODE"]).strip().upper()

    for key in NUMERIC_FIELDS:
        if key in data and not _is_blank(data[key]):
            data[key] = _to_number(data[key])

    grade = data.get("GRADE")
    if isinstance(grade, float) and _is_grade(grade):
        data["GRADE"] = int(grade)

    return data


def validate_customer(data: Mapping[str, Any], *, partial: bool = False) -> List[str]:
    """
    Check a normalized payload and return every violation, in order.

    Args:
        data:    Output of normalize_customer()
        partial: True for PATCH; only the fields present are checked

    Returns:
        Violation messages; an empty list means the payload is valid.
    """
    errors: List[str] = []

    if not partial:
        for name in REQUIRED_FIELDS:
            if _is_blank(data.get(name)):
                errors.append(f"{name} is required")

    code = data.get("CUST_CODE")
    if code and not (isinstance(code, str) and CUST_CODE_PATTERN.fullmatch(code)):
        errors.append("CUST_CODE must be 5-6 alphanumerics (e.g., C00001)")

    for name in MONETARY_FIELDS:
        if name in data and not _is_non_negative_number(data[name]):
            errors.append(f"{name} must be a non-negative number")

    if data.get("GRADE") is not None and not _is_grade(data["GRADE"]):
        errors.append("GRADE must be a number >= 0")

    phone = data.get("PHONE_NO")
    if phone and len(str(phone)) > PHONE_NO_MAX_LENGTH:
        errors.append(f"PHONE_NO max length is {PHONE_NO_MAX_LENGTH}")

    return errors


def extract_changes(
    data: Mapping[str, Any],
    allowed: tuple = MUTABLE_FIELDS,
) -> CustomerChanges:
    """
    Copy the permitted fields of `data` into a CustomerChanges.

    Keys outside `allowed` (CUST_CODE included, by default) are reported in
    `ignored` and logged at DEBUG; they never cause an error.
    """
    changes = CustomerChanges()
    for name in allowed:
        if name in data:
            changes.values[name] = data[name]
    changes.ignored = [key for key in data if key not in allowed]
    if changes.ignored:
        logger.debug("Ignoring unrecognized customer fields: %s", ", ".join(changes.ignored))
    return changes


def full_row(data: Mapping[str, Any], code: Optional[str] = None) -> Dict[str, Any]:
    """
    Build a complete customer row for INSERT/full UPDATE.

    Missing optional fields become None. When `code` is given it replaces
    whatever CUST_CODE the payload carried.
    """
    row = {name: data.get(name) for name in CUSTOMER_FIELDS}
    if code is not None:
        row["CUST_CODE"] = code
    return row
