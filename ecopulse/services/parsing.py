"""
Parsing helpers for model responses.
"""
from typing import Any, Type, TypeVar
import json
import logging

from pydantic import BaseModel, ValidationError

from ecopulse.exceptions import ResponseParseError, ResponseValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_json(text: str, label: str) -> Any:
    """Decode model output, raising ResponseParseError on malformed JSON."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"{label} response is not valid JSON: {e}")
        raise ResponseParseError(f"{label} response is not valid JSON: {e}") from e


def validate_payload(model: Type[ModelT], payload: Any, label: str) -> ModelT:
    """Validate decoded JSON against a schema model, raising ResponseValidationError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"{label} response does not match the expected schema: {e}")
        raise ResponseValidationError(f"{label} response does not match the expected schema") from e
