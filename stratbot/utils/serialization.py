"""Serialization utilities for JSON encoding of tool results.

Tool outputs handed to the language model are JSON strings. This module
provides a shared encoder for the types those results contain:
- pydantic models (World Bank topics, indicators, data records)
- datetime objects
"""
from __future__ import annotations

import json
from datetime import datetime, date
from typing import Any

from pydantic import BaseModel


class ModelEncoder(json.JSONEncoder):
    """
    JSON encoder that understands pydantic models.

    Example:
        >>> json.dumps([Topic(id="1", value="Agriculture", sourceNote="")], cls=ModelEncoder)
        '[{"id": "1", "value": "Agriculture", "sourceNote": ""}]'
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")

        if isinstance(obj, (datetime, date)):
            return obj.isoformat()

        return super().default(obj)


def json_serialize(obj: Any, **kwargs: Any) -> str:
    """
    Serialize object to JSON string using ModelEncoder.

    Args:
        obj: Object to serialize (model, list of models, dict, ...)
        **kwargs: Additional arguments passed to json.dumps

    Returns:
        JSON string representation
    """
    return json.dumps(obj, cls=ModelEncoder, **kwargs)
