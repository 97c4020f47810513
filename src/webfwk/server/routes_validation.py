"""Validation routes: list schemas, validate payloads, ad-hoc rule checks."""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from webfwk.validation.models import RuleSpec, describe_rule
from webfwk.validation.ruleset import Ruleset
from webfwk.validation.schema import UnknownSchemaError, get_validator

logger = logging.getLogger(__name__)

_RULE_LIST = TypeAdapter(list[RuleSpec])


async def list_schemas(request: Request) -> JSONResponse:
    """GET /api/schemas — list configured schemas with their rules."""
    validators = request.app.state.validators
    schemas = [v.spec.model_dump() for v in validators.values()]
    return JSONResponse({"schemas": schemas, "count": len(schemas)})


async def get_schema(request: Request) -> JSONResponse:
    """GET /api/schemas/{name} — get one schema."""
    name = request.path_params["name"]
    try:
        validator = get_validator(request.app.state.validators, name)
    except UnknownSchemaError as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    return JSONResponse(validator.spec.model_dump())


async def validate_payload(request: Request) -> JSONResponse:
    """POST /api/schemas/{name}/validate — validate a JSON object against a schema."""
    name = request.path_params["name"]
    try:
        validator = get_validator(request.app.state.validators, name)
    except UnknownSchemaError as e:
        return JSONResponse({"error": str(e)}, status_code=404)

    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Request body must be valid JSON"}, status_code=400)
    if not isinstance(body, dict):
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=422)

    report = validator.validate(body)
    if not report.valid and request.app.state.validation_config.log_rejections:
        logger.info(f"Payload rejected by schema '{name}': fields {sorted(report.errors)}")
    return JSONResponse(report.model_dump(), status_code=200 if report.valid else 422)


async def validate_value(request: Request) -> JSONResponse:
    """POST /api/validate — check one value against rules given in the body."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Request body must be valid JSON"}, status_code=400)
    if not isinstance(body, dict) or "value" not in body:
        return JSONResponse({"error": "Body must be an object with a 'value' key"}, status_code=422)

    try:
        specs = _RULE_LIST.validate_python(body.get("rules", []))
    except ValidationError as e:
        return JSONResponse(
            {"error": "Invalid rules", "details": json.loads(e.json())},
            status_code=422,
        )

    ruleset = Ruleset().add_rule(*(s.build() for s in specs))
    result = ruleset.check(body["value"])
    return JSONResponse(
        {
            "valid": result.valid,
            "error_count": len(result.errors),
            "errors": [describe_rule(r) for r in result.errors],
        }
    )


routes = [
    Route("/api/schemas", list_schemas),
    Route("/api/schemas/{name}", get_schema),
    Route("/api/schemas/{name}/validate", validate_payload, methods=["POST"]),
    Route("/api/validate", validate_value, methods=["POST"]),
]
