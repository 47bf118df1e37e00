"""Load API documents and detect which specification dialect they use."""

import json
from pathlib import Path

import yaml

from .base import SpecLoadError

PARSE_FAILURE_MESSAGE = "Unable to parse API specification: Not valid JSON or YAML"


def load_document(file_path: Path):
    """Decode a JSON or YAML file, keeping mapping key order."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SpecLoadError(PARSE_FAILURE_MESSAGE, detail=str(e)) from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        yaml_error = e

    # Some JSON (e.g. tab-indented) is not valid YAML
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        raise SpecLoadError(PARSE_FAILURE_MESSAGE, detail=str(yaml_error)) from yaml_error


def detect_format(doc) -> str:
    """Detect the dialect of a decoded document.

    Returns: 'openapi', 'swagger', or 'unknown'.
    """
    if isinstance(doc, dict):
        if "openapi" in doc:
            return "openapi"
        if "swagger" in doc:
            return "swagger"
    return "unknown"
