"""
SalesDesk API — Customer Route Handlers
========================================

What:  CRUD endpoints under /api/customers.
How:   Reads the raw JSON body, delegates to CustomerService, and picks the
       status code. Errors are raised by the service and rendered by the
       global exception handlers in main.py.

Endpoints:
    GET    /api/customers          list (≤50, summary columns)
    GET    /api/customers/{code}   fetch one
    POST   /api/customers          create            201 / 400 / 409
    PUT    /api/customers/{code}   create or replace 201 / 200 / 400
    PATCH  /api/customers/{code}   partial update    200 / 400 / 404
    DELETE /api/customers/{code}   delete            204 / 404

Request bodies are read as untyped JSON rather than bound to a Pydantic
model so normalization can run before validation and every violation is
reported with its own message. The documented body schemas are attached
through `openapi_extra`.
"""

import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Request, Response

from salesdesk.database import Database, get_database
from salesdesk.exceptions import BadRequestError
from salesdesk.schemas.common import ErrorResponse, ValidationErrorResponse
from salesdesk.schemas.customer import Customer, CustomerSummary
from salesdesk.services.customer_service import customer_service

router = APIRouter(prefix="/api", tags=["Customers"])

CODE_PATH = Path(
    ...,
    description="Customer code (5-6 alphanumerics)",
    examples=["C00001"],
)


def _json_body(schema_name: str) -> Dict[str, Any]:
    """openapi_extra fragment documenting a required JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {"$ref": f"#/components/schemas/{schema_name}"},
                },
            },
        },
    }


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body counts as {} so the validator reports the missing fields.

    Raises:
        BadRequestError: Body is not JSON, or not a JSON object
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise BadRequestError(message="Request body must be a JSON object") from None
    if not isinstance(payload, dict):
        raise BadRequestError(message="Request body must be a JSON object")
    return payload


@router.get(
    "/customers",
    response_model=List[CustomerSummary],
    responses={
        200: {"description": "Array of customers (limited to 50)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List customers",
)
async def list_customers(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    return await customer_service.list_customers(db)


@router.get(
    "/customers/{code}",
    response_model=Customer,
    responses={
        200: {"description": "Customer"},
        404: {"description": "Not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a customer by code",
)
async def get_customer(
    code: str = CODE_PATH,
    db: Database = Depends(get_database),
) -> Dict[str, Any]:
    return await customer_service.get_customer(db, code)


@router.post(
    "/customers",
    status_code=201,
    response_model=Customer,
    responses={
        201: {"description": "Created"},
        400: {"description": "Validation error", "model": ValidationErrorResponse},
        409: {"description": "Duplicate CUST_CODE", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a customer",
    openapi_extra=_json_body("CustomerCreate"),
)
async def create_customer(
    request: Request,
    db: Database = Depends(get_database),
) -> Dict[str, Any]:
    payload = await read_json_object(request)
    return await customer_service.create_customer(db, payload)


@router.put(
    "/customers/{code}",
    response_model=Customer,
    responses={
        200: {"description": "Updated"},
        201: {"description": "Created", "model": Customer},
        400: {"description": "Validation error", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create or replace a customer",
    description=(
        "Replaces every mutable field of the customer at `code`. When no such "
        "customer exists it is created and the response status is 201. The path "
        "code always wins over a CUST_CODE in the body."
    ),
    openapi_extra=_json_body("CustomerCreate"),
)
async def replace_customer(
    request: Request,
    response: Response,
    code: str = CODE_PATH,
    db: Database = Depends(get_database),
) -> Dict[str, Any]:
    payload = await read_json_object(request)
    row, created = await customer_service.replace_customer(db, code, payload)
    response.status_code = 201 if created else 200
    return row


@router.patch(
    "/customers/{code}",
    response_model=Customer,
    responses={
        200: {"description": "Updated"},
        400: {"description": "Validation error", "model": ValidationErrorResponse},
        404: {"description": "Not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Partially update a customer",
    openapi_extra=_json_body("CustomerPatch"),
)
async def patch_customer(
    request: Request,
    code: str = CODE_PATH,
    db: Database = Depends(get_database),
) -> Dict[str, Any]:
    payload = await read_json_object(request)
    return await customer_service.patch_customer(db, code, payload)


@router.delete(
    "/customers/{code}",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Deleted"},
        404: {"description": "Not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a customer",
)
async def delete_customer(
    code: str = CODE_PATH,
    db: Database = Depends(get_database),
) -> Response:
    await customer_service.delete_customer(db, code)
    return Response(status_code=204)
