"""OpenAPI / Swagger document normalizer.

Turns OpenAPI 3.x and Swagger 2.0 documents into an ApiDocumentation model.
"""

import logging
from pathlib import Path

from .base import SUPPORTED_METHODS, ApiDocumentation, Endpoint, UnsupportedSpecError
from .detect import detect_format, load_document
from .examples import MAX_EXAMPLE_DEPTH
from .params import resolve_parameters
from .responses import select_response_example

log = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "Unsupported API specification format. Only OpenAPI/Swagger is currently supported."


def parse_openapi(file_path: Path, max_example_depth: int = MAX_EXAMPLE_DEPTH) -> ApiDocumentation:
    """Load an OpenAPI/Swagger file (JSON or YAML) and normalize it."""
    return normalize_spec(load_document(file_path), max_example_depth=max_example_depth)


def normalize_spec(spec, max_example_depth: int = MAX_EXAMPLE_DEPTH) -> ApiDocumentation:
    """Normalize a decoded OpenAPI/Swagger document.

    Raises UnsupportedSpecError when ``spec`` is not a mapping or carries
    neither an ``openapi`` nor a ``swagger`` key. Everything else degrades
    to defaults.
    """
    if not isinstance(spec, dict):
        raise UnsupportedSpecError(UNSUPPORTED_MESSAGE, detail=f"Expected an object, got {type(spec).__name__}")
    if detect_format(spec) == "unknown":
        raise UnsupportedSpecError(UNSUPPORTED_MESSAGE, detail="Missing 'openapi' or 'swagger' key")

    info = spec.get("info")
    info = info if isinstance(info, dict) else {}

    return ApiDocumentation(
        api_name=_text(info.get("title")) or "API Documentation",
        base_url=_base_url(spec),
        description=_text(info.get("description")),
        version=_text(info.get("version")) or "1.0.0",
        endpoints=_endpoints(spec.get("paths"), max_example_depth),
    )


def _endpoints(paths, max_example_depth: int) -> list[Endpoint]:
    if not isinstance(paths, dict):
        if paths is not None:
            log.debug("Ignoring non-object paths: %r", type(paths).__name__)
        return []

    endpoints = []
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            log.debug("Skipping malformed path item %s", path)
            continue
        for method, operation in path_item.items():
            method = str(method).upper()
            if method not in SUPPORTED_METHODS:
                continue
            operation = operation if isinstance(operation, dict) else {}

            security = operation.get("security")
            endpoints.append(
                Endpoint(
                    method=method,
                    path=str(path),
                    title=_text(operation.get("summary")) or f"{method} {path}",
                    description=_text(operation.get("description")),
                    requires_auth=isinstance(security, list) and len(security) > 0,
                    parameters=resolve_parameters(operation, method),
                    response_example=select_response_example(operation.get("responses"), max_example_depth),
                )
            )
    return endpoints


def _base_url(spec: dict) -> str:
    servers = spec.get("servers")
    if isinstance(servers, list) and servers and isinstance(servers[0], dict):
        return _text(servers[0].get("url"))

    # Swagger 2.0
    host = spec.get("host")
    if not host:
        return ""
    schemes = spec.get("schemes")
    scheme = schemes[0] if isinstance(schemes, list) and schemes else "https"
    return f"{scheme}://{host}{_text(spec.get('basePath'))}"


def _text(value) -> str:
    return "" if value is None else str(value)
