"""
Pydantic models for whisky data.

``WhiskyCreate`` is the body of ``POST /api/whiskies`` and carries the
client‑chosen ``id``.  ``WhiskyUpdate`` is the body of
``PUT /api/whiskies/{id}``; any ``id`` it contains is ignored.
``WhiskyRead`` is returned by every read operation.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Identifiers are 32-bit signed integers on the wire.
ID_MIN = -(2 ** 31)
ID_MAX = 2 ** 31 - 1


class WhiskyBase(BaseModel):
    # Numbers sent as name or origin are kept as their text.
    model_config = {
        "coerce_numbers_to_str": True,
    }

    name: Optional[str] = Field(None, examples=["Talisker 57° North"])
    origin: Optional[str] = Field(None, examples=["Scotland, Island"])


class WhiskyCreate(WhiskyBase):
    """Schema for creating a whisky.  The identifier is mandatory."""

    id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[2])


class WhiskyUpdate(WhiskyBase):
    """Schema for updating a whisky.

    Both fields are written as given: a field missing from the body
    clears the stored value.
    """

    id: Optional[int] = None


class WhiskyRead(BaseModel):
    """Schema for reading a whisky from the API."""

    id: int
    name: Optional[str] = None
    origin: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
