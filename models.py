"""Shared Pydantic models for bundled asset lookups."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class Found(BaseModel):
    """A bundled asset that was read successfully."""
    model_config = ConfigDict(frozen=True)

    path: str
    content: bytes


class NotFound(BaseModel):
    """A bundled asset that is absent or could not be read."""
    model_config = ConfigDict(frozen=True)

    path: str


AssetResult = Union[Found, NotFound]
