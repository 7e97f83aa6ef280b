"""
Wire models for registry error responses.

These Pydantic models describe the JSON body the transport layer writes
for a failed request:

    {"errors": [{"code": "UNKNOWN_MANIFEST", "message": "...", "detail": ...}]}

Codes travel as their canonical strings and are parsed leniently, so an
envelope produced by a newer or foreign registry still loads.
"""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
)

from .codes import ErrorCode, error_code_string, parse_error_code

__all__ = ["ErrorPayload", "ErrorEnvelope", "FSLayer", "DetailUnknownLayer"]


class ErrorPayload(BaseModel):
    """Single error element of an envelope."""
    model_config = ConfigDict(frozen=True)

    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Error code, canonical string on the wire")
    message: str = Field(default="", description="Human-readable message (omitted if empty)")
    detail: Any = Field(default=None, description="Free-form diagnostic payload (omitted if absent)")

    @field_validator("code", mode="before")
    @classmethod
    def parse_code(cls, v: Any) -> ErrorCode:
        """Unrecognized code strings load as UNKNOWN."""
        return parse_error_code(v)

    @field_serializer("code")
    def serialize_code(self, code: ErrorCode) -> str:
        return error_code_string(code)

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.message:
            data.pop("message", None)
        if self.detail is None:
            data.pop("detail", None)
        return data


class ErrorEnvelope(BaseModel):
    """Top-level error response body."""
    errors: List[ErrorPayload] = Field(default_factory=list, description="Errors in push order")

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.errors:
            data.pop("errors", None)
        return data


class FSLayer(BaseModel):
    """Layer descriptor as referenced by an image manifest."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    blob_sum: str = Field(..., alias="blobSum", description="Content digest of the layer blob")


class DetailUnknownLayer(BaseModel):
    """
    Detail for UNKNOWN_LAYER errors.

    Returned by image manifest push for layers that are not yet
    transferred. Only intended for the backend to describe this specific
    error.
    """
    model_config = ConfigDict(frozen=True)

    unknown: FSLayer = Field(..., description="Descriptor of the missing layer")
