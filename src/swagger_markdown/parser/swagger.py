"""Swagger 2.0 document loader.

Reads a JSON (or, by file suffix, YAML) document from disk, checks the
top-level sections every document needs and returns an ApiDocument.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swagger_markdown.errors import DocumentLoadError, DocumentValidationError

from .base import ApiDocument

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("swagger", "info", "paths")
YAML_SUFFIXES = (".yaml", ".yml")


def load_document(file_path: Path) -> ApiDocument:
    """Read, parse and validate a Swagger document."""
    file_path = Path(file_path)
    if not file_path.is_file():
        raise DocumentLoadError(f"Unable to find file {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Unable to read {file_path}: {e}") from e

    if not text.strip():
        raise DocumentLoadError(f"Invalid swagger document: {file_path} is empty")

    raw = _parse_text(text, file_path)
    document = parse_document(raw)
    logger.info(
        "Loaded '%s' from %s (%d paths)",
        document.info.title, file_path, len(document.paths),
    )
    return document


def parse_document(raw: Any) -> ApiDocument:
    """Validate an already parsed document and build the model."""
    validate_document(raw)
    try:
        return ApiDocument.model_validate(raw)
    except ValidationError as e:
        raise DocumentValidationError(f"Invalid swagger document: {e}") from e


def validate_document(raw: Any) -> None:
    """Reject documents missing one of the required top-level sections."""
    if not isinstance(raw, dict):
        raise DocumentValidationError("Invalid swagger document: expected a JSON object at the top level")
    for key in REQUIRED_SECTIONS:
        if not raw.get(key):
            raise DocumentValidationError(f"Invalid swagger document: missing '{key}' section")


def _parse_text(text: str, file_path: Path) -> Any:
    if file_path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentLoadError(f"Unable to parse {file_path} as YAML: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Unable to parse {file_path} as JSON: {e}") from e
