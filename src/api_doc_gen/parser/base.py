"""Normalized data models for parsed API documentation.

The OpenAPI/Swagger normalizer produces these models and the HTML
generator consumes them read-only.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


class _Model(BaseModel):
    # camelCase on the wire (apiName, requiresAuth, ...), snake_case in Python
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Parameter(_Model):
    """A single documented parameter, explicit or flattened from a request body."""

    name: str
    type: str = "object"  # string / integer / array[string] / object ...
    description: str = ""
    required: bool = False


class Endpoint(_Model):
    """One documented operation."""

    method: Literal["GET", "POST", "PUT", "DELETE"]
    path: str  # /pets/{petId}
    title: str = ""
    description: str = ""
    requires_auth: bool = False
    parameters: tuple[Parameter, ...] = ()
    response_example: str = ""  # JSON text, or "" when none could be produced


class ApiDocumentation(_Model):
    """The whole documented API."""

    api_name: str = "API Documentation"
    base_url: str = ""
    description: str = ""
    version: str = "1.0.0"
    endpoints: tuple[Endpoint, ...] = ()


class SpecError(Exception):
    """A user-facing failure to turn input into documentation.

    ``detail`` holds optional technical detail (parser messages etc.) that
    callers may show on request.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class SpecLoadError(SpecError):
    """The input file could not be decoded as JSON or YAML."""


class UnsupportedSpecError(SpecError):
    """The decoded input is not an OpenAPI/Swagger document."""
