"""
Error representation for an OCI artifact registry.

Coded API errors (ErrorCode, Error, Errors), their JSON wire models and
the storage-layer errors that request handlers translate into them.
"""
from __future__ import annotations

from .codes import ErrorCode, error_code_message, error_code_string, parse_error_code
from .errors import Error, Errors
from .models import DetailUnknownLayer, ErrorEnvelope, ErrorPayload, FSLayer
from .storage_errors import (
    BlobNotFoundError,
    BlobUploadInvalidRangeError,
    BlobUploadNotFoundError,
    ManifestNotFoundError,
    RegistryStorageError,
    RepositoryNotFoundError,
    UnexpectedHTTPStatusError,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "error_code_string",
    "error_code_message",
    "parse_error_code",
    "Error",
    "Errors",
    "ErrorPayload",
    "ErrorEnvelope",
    "FSLayer",
    "DetailUnknownLayer",
    "RegistryStorageError",
    "RepositoryNotFoundError",
    "ManifestNotFoundError",
    "BlobNotFoundError",
    "BlobUploadNotFoundError",
    "BlobUploadInvalidRangeError",
    "UnexpectedHTTPStatusError",
]
