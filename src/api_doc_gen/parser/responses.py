"""Response selector — picks a representative response and renders its example as JSON text."""

import json
import logging

from .examples import MAX_EXAMPLE_DEPTH, generate_example

log = logging.getLogger(__name__)

SUCCESS_CODES = ("200", "201", "202", "203", "204", "206")


def to_json(value) -> str:
    """Serialize ``value`` with 2-space indentation, keeping key order.

    Raises ValueError for NaN/Infinity, which have no JSON form.
    """
    # default=str covers YAML-only scalars such as dates
    return json.dumps(value, indent=2, ensure_ascii=False, default=str, allow_nan=False)


def select_response_example(responses: dict | None, max_depth: int = MAX_EXAMPLE_DEPTH) -> str:
    """Return the example JSON for the most representative response, or ``""``."""
    if not isinstance(responses, dict) or not responses:
        return ""

    # YAML loads bare status codes as ints
    by_code = {str(code): resp for code, resp in responses.items()}
    code = next((c for c in SUCCESS_CODES if c in by_code), None)
    if code is None:
        code = next(iter(by_code))
        log.debug("No success response, falling back to %s", code)

    response = by_code[code]
    if not isinstance(response, dict):
        return ""

    if "content" in response:
        media = _first_json_entry(response["content"])
        if media is None:
            return ""
        if media.get("example") is not None:
            return _example_text(media["example"])
        if media.get("schema") is not None:
            return _example_text(generate_example(media["schema"], max_depth))
        return ""

    # Swagger 2.0: examples keyed by mime type, schema on the response itself
    examples = _first_json_entry(response.get("examples"), require_mapping=False)
    if examples is not None:
        return _example_text(examples)
    if response.get("schema") is not None:
        return _example_text(generate_example(response["schema"], max_depth))
    return ""


def _first_json_entry(content, require_mapping: bool = True):
    if not isinstance(content, dict):
        return None
    for content_type, value in content.items():
        if "json" in str(content_type):
            if require_mapping and not isinstance(value, dict):
                return None
            return value
    return None


def _example_text(value) -> str:
    try:
        return to_json(value)
    except ValueError as e:
        log.debug("Dropping example that is not representable as JSON: %s", e)
        return ""
