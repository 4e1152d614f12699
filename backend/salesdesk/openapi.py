"""
SalesDesk API — OpenAPI Document
=================================

What:  Builds the machine-readable API description served at /openapi.json
       and rendered by Swagger UI at /api-docs.
How:   FastAPI's get_openapi() walks the registered routes and response
       models; this module adds the request body schemas (CustomerCreate,
       CustomerPatch) that the routes reference through openapi_extra, since
       those bodies are read as raw JSON and FastAPI cannot infer them.
When:  Built on the first request for the document, then cached on the app.

Nothing here touches the database: the document depends only on the route
table and the Pydantic models, which are fixed at import time.
"""

from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

from salesdesk.schemas.customer import CustomerCreate, CustomerPatch

API_DESCRIPTION = (
    "FastAPI + MariaDB API for customers, orders, and agents.\n\n"
    "All data endpoints live under `/api`. Validation failures return "
    '`{"errors": [...]}`; every other error returns `{"error": "..."}`.'
)

OPENAPI_TAGS = [
    {"name": "Customers", "description": "Create, read, replace, patch and delete customers."},
    {"name": "Orders", "description": "Read-only order listing, filterable by customer and agent."},
    {"name": "Agents", "description": "Read-only agent listing."},
    {"name": "Health", "description": "Service liveness and database connectivity."},
]

# Swagger UI: operations listed, models section collapsed, examples shown
SWAGGER_UI_PARAMETERS = {
    "docExpansion": "list",
    "defaultModelsExpandDepth": -1,
    "defaultModelExpandDepth": 0,
    "defaultModelRendering": "example",
}

# Request bodies documented via openapi_extra $refs
REQUEST_BODY_MODELS = (CustomerCreate, CustomerPatch)


def _component_schema(model: type[BaseModel], components: Dict[str, Any]) -> Dict[str, Any]:
    schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
    for name, nested in schema.pop("$defs", {}).items():
        components.setdefault(name, nested)
    return schema


def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """
    Return the OpenAPI document for `app`, building it once.

    Returns:
        The dict FastAPI serves at app.openapi_url.
    """
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
    )

    components = schema.setdefault("components", {}).setdefault("schemas", {})
    for model in REQUEST_BODY_MODELS:
        components.setdefault(model.__name__, _component_schema(model, components))

    app.openapi_schema = schema
    return schema


def install_openapi(app: FastAPI) -> None:
    """Replace app.openapi with the cached builder above."""
    app.openapi = lambda: build_openapi(app)
