"""Example synthesizer — derives a representative value from a JSON Schema fragment."""

REFERENCE_PLACEHOLDER = {"_example": "Referenced type"}
TRUNCATED_PLACEHOLDER = {"_example": "Max depth exceeded"}

MAX_EXAMPLE_DEPTH = 32

_SCALAR_DEFAULTS = {
    "string": "string",
    "number": 0,
    "integer": 0,
    "boolean": False,
}


def generate_example(schema: dict | None, max_depth: int = MAX_EXAMPLE_DEPTH):
    """Build an example value for ``schema``.

    ``$ref`` schemas are never resolved; they yield a fixed placeholder.
    Nesting deeper than ``max_depth`` yields a truncation placeholder.
    """
    return _example(schema, 0, max_depth)


def _example(schema, depth: int, max_depth: int):
    if not isinstance(schema, dict):
        return {}
    if depth > max_depth:
        return dict(TRUNCATED_PLACEHOLDER)

    if "$ref" in schema:
        return dict(REFERENCE_PLACEHOLDER)

    schema_type = schema.get("type")

    if schema_type == "object":
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            return {}
        return {
            name: _example(prop, depth + 1, max_depth)
            for name, prop in properties.items()
        }

    if schema_type == "array":
        items = schema.get("items")
        if items is None:
            return []
        return [_example(items, depth + 1, max_depth)]

    fallback = _SCALAR_DEFAULTS.get(schema_type) if isinstance(schema_type, str) else None
    if schema.get("example") is not None:
        return schema["example"]
    if schema.get("default") is not None:
        return schema["default"]
    return fallback
