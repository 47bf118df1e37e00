"""Parameter resolver — merges explicit parameters with flattened request-body properties."""

import logging

from .base import Parameter

log = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT")
BODY_CONTENT_MARKERS = ("json", "x-www-form-urlencoded")


def resolve_parameters(operation: dict, method: str) -> list[Parameter]:
    """Return explicit parameters first, then request-body properties, each in source order."""
    raw = operation.get("parameters")
    params = [p for p in raw if isinstance(p, dict)] if isinstance(raw, list) else []

    result = [
        Parameter(
            name="" if p.get("name") is None else str(p["name"]),
            type=infer_type(p),
            description=str(p.get("description") or ""),
            required=bool(p.get("required", False)),
        )
        for p in params
    ]

    if method.upper() in BODY_METHODS and operation.get("requestBody"):
        result.extend(_body_parameters(operation["requestBody"]))

    return result


def infer_type(param: dict) -> str:
    """Infer a display type for a parameter.

    Priority: ``array[<item type>]``, then ``schema.type``, then the legacy
    Swagger 2.0 ``type``, then ``"object"``.
    """
    schema = param.get("schema")
    if isinstance(schema, dict) and schema.get("type"):
        items = schema.get("items")
        if schema["type"] == "array" and isinstance(items, dict) and items.get("type"):
            return f"array[{items['type']}]"
        return str(schema["type"])
    if param.get("type"):
        return str(param["type"])
    return "object"


def _body_parameters(request_body) -> list[Parameter]:
    content = request_body.get("content") if isinstance(request_body, dict) else None
    if not isinstance(content, dict):
        return []

    content_type = next(
        (ct for ct in content if any(marker in str(ct) for marker in BODY_CONTENT_MARKERS)),
        None,
    )
    if content_type is None:
        log.debug("Request body has no JSON or form content: %s", list(content))
        return []

    media = content[content_type]
    schema = media.get("schema") if isinstance(media, dict) else None
    properties = schema.get("properties") if isinstance(schema, dict) else None
    if not isinstance(properties, dict):
        return []

    required = schema.get("required")
    required = required if isinstance(required, list) else []

    result = []
    for name, prop in properties.items():
        prop = prop if isinstance(prop, dict) else {}
        result.append(
            Parameter(
                name=str(name),
                type=infer_type({"schema": prop}),
                description=str(prop.get("description") or ""),
                required=name in required,
            )
        )
    return result
