"""
Response validation for World Bank API bodies.

Raw response text is parsed and validated in one step with pydantic, so a
body that is not JSON and a body that does not match the schema fail the
same way: with a structural diagnostic listing every failing path.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ParseResult(Generic[M]):
    """Outcome of ``safe_parse``: either ``data`` or ``error`` is set."""

    success: bool
    data: Optional[M] = None
    error: Optional[pydantic.ValidationError] = None

    @property
    def errors(self) -> List[Dict[str, Any]]:
        if self.error is None:
            return []
        return self.error.errors(include_url=False, include_context=False, include_input=False)


def safe_parse(model: Type[M], text: str | bytes) -> ParseResult[M]:
    """Parse ``text`` as JSON and validate it against ``model`` without raising."""
    try:
        return ParseResult(success=True, data=model.model_validate_json(text))
    except pydantic.ValidationError as exc:
        return ParseResult(success=False, error=exc)


def parse_response(model: Type[M], text: str | bytes) -> M:
    """
    Parse and validate a response body.

    Args:
        model: Pydantic model describing the expected body
        text: Raw response text

    Returns:
        The validated model instance

    Raises:
        ValidationError: If the text is not JSON or does not match the schema
    """
    result = safe_parse(model, text)
    if not result.success:
        errors = result.errors
        logger.warning(f"Response failed validation against {model.__name__}: {len(errors)} error(s)")
        raise ValidationError(
            "Failed to parse response",
            errors=errors,
        ) from result.error
    return result.data
