# =============================================================================
# core/models/record.py - Record Schema
# =============================================================================
# The only entity the API persists: an {id, name} pair supplied by the caller.
#
# A Record lives only for the duration of a create request. It is decoded
# from the request body, handed to the datastore in one insert, and echoed
# back to the client. The database is the sole owner of stored records.
# =============================================================================

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_decoder = json.JSONDecoder()


class Record(BaseModel):
    """
    Schema for a record submitted to POST /data.

    Both fields are plain strings. Missing fields default to "" and unknown
    fields are ignored, so any JSON object with string (or null) values for
    `id` and `name` decodes successfully. Keys match case-insensitively
    ("ID", "Name"), with an exact-case key taking precedence. Uniqueness of
    `id` is left to the database.

    Example:
        {
            "id": "42",
            "name": "Ada Lovelace"
        }
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(
        default="",
        description="Caller-supplied identifier (not generated by the API)"
    )

    name: str = Field(
        default="",
        description="Display name stored alongside the id"
    )

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        """Map "ID", "Name", ... onto the field names when no exact key exists."""
        if not isinstance(data, dict):
            return data
        folded = dict(data)
        for field in cls.model_fields:
            if field in data:
                continue
            for key, value in data.items():
                if isinstance(key, str) and key.casefold() == field:
                    folded[field] = value
        return folded

    @field_validator("id", "name", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        """Treat JSON null like a missing field."""
        return "" if value is None else value

    @classmethod
    def from_body(cls, raw: bytes) -> "Record":
        """
        Decode a request body.

        Only the first JSON value is read; anything after it is ignored. A
        bare `null` yields an empty record.

        Raises:
            ValueError: If the body is not UTF-8, holds no JSON value, or the
                value is not a valid record (pydantic's ValidationError is a
                ValueError)
        """
        text = raw.decode("utf-8").lstrip(" \t\r\n")
        value, _ = _decoder.raw_decode(text)
        if value is None:
            return cls()
        return cls.model_validate(value)
