"""
Shared CRUD routes for every resource type.

Routing and authorization are driven by one explicit table,
``ROUTES``, mapping each operation to its HTTP method, path suffix and
required role.  ``build_resource_router`` applies the table to a
``ResourceDefinition`` and returns an ``APIRouter`` exposing::

    GET    /<resource>/all            USER   list every record
    GET    /<resource>?id=<id>        USER   fetch one record
    POST   /<resource>/post?<fields>  ADMIN  create a record
    PUT    /<resource>?id=<id>        ADMIN  replace a record (JSON body)
    DELETE /<resource>?id=<id>        ADMIN  delete a record

The role check is attached as a route-level dependency, which FastAPI
resolves before the endpoint's own dependencies and before the service
is called.  The JSON body of an update is read by an endpoint
dependency rather than declared as a body parameter, so a caller
without the role is refused before the body is parsed.  Resources
keyed by a caller-supplied string use ``code`` instead of ``id`` in
the query string.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Type

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from campus_api.app.core.security import ROLE_ADMIN, ROLE_USER, require_role
from campus_api.app.schemas.common import ErrorResponse, GenericMessage
from campus_api.app.services.resource_service import ResourceService


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything the router and the app factory need to know about a resource type."""

    kind: str  # entity name used in messages, e.g. "Articles"
    path: str
    table: str
    record_model: Type[BaseModel]
    create_model: Type[BaseModel]
    fields_model: Type[BaseModel]
    key_field: str = "id"
    key_type: type = int


@dataclass(frozen=True)
class Route:
    operation: str
    method: str
    path: str
    role: str


ROUTES: List[Route] = [
    Route("list_all", "GET", "/all", ROLE_USER),
    Route("get_by_id", "GET", "", ROLE_USER),
    Route("create", "POST", "/post", ROLE_ADMIN),
    Route("update", "PUT", "", ROLE_ADMIN),
    Route("delete", "DELETE", "", ROLE_ADMIN),
]


def query_model(model: Type[BaseModel]) -> Callable[[Request], BaseModel]:
    """Dependency factory validating the query string against ``model``.

    Parse failures (missing fields, unparsable timestamps) are raised as
    ``RequestValidationError`` so they share the 400 envelope with
    FastAPI's own validation errors.
    """

    def _parse(request: Request) -> BaseModel:
        try:
            return model.model_validate(dict(request.query_params))
        except ValidationError as exc:
            errors = [{**err, "loc": ("query", *err["loc"])} for err in exc.errors(include_url=False)]
            raise RequestValidationError(errors)

    return _parse


def body_model(model: Type[BaseModel]) -> Callable[[Request], Any]:
    """Dependency factory reading the JSON request body into ``model``.

    Runs after the route-level role check, so malformed bodies from
    callers without the role never reach the decoder.
    """

    async def _parse(request: Request) -> BaseModel:
        try:
            payload = await request.json()
        except ValueError:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": None}]
            )
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            errors = [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_url=False)]
            raise RequestValidationError(errors)

    return _parse


def _service_dependency(definition: ResourceDefinition) -> Callable[[Request], ResourceService]:
    def _get_service(request: Request) -> ResourceService:
        return request.app.state.services[definition.kind]

    return _get_service


def _build_endpoint(operation: str, definition: ResourceDefinition) -> Callable[..., Any]:
    get_service = _service_dependency(definition)
    key_type = definition.key_type
    key_field = definition.key_field
    fields_model = definition.fields_model

    if operation == "list_all":
        async def endpoint(service: ResourceService = Depends(get_service)) -> Any:
            return await service.list_all()

    elif operation == "get_by_id":
        async def endpoint(
            key: key_type = Query(..., alias=key_field),
            service: ResourceService = Depends(get_service),
        ) -> Any:
            return await service.get_by_id(key)

    elif operation == "create":
        async def endpoint(
            fields: BaseModel = Depends(query_model(definition.create_model)),
            service: ResourceService = Depends(get_service),
        ) -> Any:
            return await service.create(fields)

    elif operation == "update":
        async def endpoint(
            key: key_type = Query(..., alias=key_field),
            fields: BaseModel = Depends(body_model(fields_model)),
            service: ResourceService = Depends(get_service),
        ) -> Any:
            return await service.update(key, fields)

    elif operation == "delete":
        async def endpoint(
            key: key_type = Query(..., alias=key_field),
            service: ResourceService = Depends(get_service),
        ) -> Any:
            return GenericMessage(message=await service.delete(key))

    else:
        raise ValueError(f"Unknown operation {operation!r}")

    return endpoint


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """Create the CRUD router for one resource type from ``ROUTES``."""
    response_models = {
        "list_all": List[definition.record_model],
        "get_by_id": definition.record_model,
        "create": definition.record_model,
        "update": definition.record_model,
        "delete": GenericMessage,
    }
    # The update body is parsed by a dependency, so document it by hand.
    update_body = {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": definition.fields_model.model_json_schema(by_alias=True)}},
        }
    }
    router = APIRouter()
    for route in ROUTES:
        router.add_api_route(
            route.path,
            _build_endpoint(route.operation, definition),
            methods=[route.method],
            name=f"{route.operation}_{definition.path}",
            response_model=response_models[route.operation],
            dependencies=[Depends(require_role(route.role))],
            responses={
                400: {"model": ErrorResponse},
                403: {"description": "Caller lacks the required role"},
                404: {"model": ErrorResponse},
            },
            openapi_extra=update_body if route.operation == "update" else None,
        )
    return router
