"""
Registry error codes.

The error code vocabulary is serialized via its canonical strings. The
position of a code within the enumeration may change between releases and
must never be exported; only the string form is part of the API contract.
"""
from __future__ import annotations

import functools
import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCode",
    "error_code_string",
    "error_code_message",
    "parse_error_code",
]


@functools.total_ordering
class ErrorCode(Enum):
    """
    Closed set of error conditions reported by the registry API.

    UNKNOWN is a catch-all for errors not defined below and is the
    default code. Codes order by declaration, never compare equal to
    integers and render as their canonical string.
    """
    UNKNOWN = 0

    # Layer upload errors
    INVALID_DIGEST = 1          # provided digest does not match the layer contents
    INVALID_LENGTH = 2          # provided length does not match the content length

    # Manifest errors
    INVALID_NAME = 3            # name in the manifest does not match the URI
    INVALID_TAG = 4             # tag in the manifest does not match the URI
    UNKNOWN_REPOSITORY = 5
    UNKNOWN_MANIFEST = 6        # accompanied by a 404 status
    INVALID_MANIFEST = 7        # typically during a PUT
    UNVERIFIED_MANIFEST = 8     # manifest fails signature validation
    UNKNOWN_LAYER = 9           # manifest references a nonexistent layer
    UNKNOWN_LAYER_UPLOAD = 10   # upload accessed after cancel, completion or expiry
    UNTRUSTED_SIGNATURE = 11    # manifest signed by an untrusted source

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return error_code_string(self)

    @property
    def message(self) -> str:
        """Human-readable message for this error code."""
        return error_code_message(self)

    @classmethod
    def parse(cls, text: Any) -> ErrorCode:
        """Parse a canonical string, returning UNKNOWN if it is not known."""
        return parse_error_code(text)

    def marshal_text(self) -> bytes:
        """Encode this code as its UTF-8 canonical string."""
        return error_code_string(self).encode("utf-8")

    @classmethod
    def unmarshal_text(cls, data: Union[bytes, bytearray, str]) -> ErrorCode:
        """
        Decode the form produced by marshal_text.

        Unrecognized or undecodable input yields UNKNOWN rather than raising.
        """
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError:
                logger.debug(f"Undecodable error code bytes {data!r}, using {cls.UNKNOWN}")
                return cls.UNKNOWN
        return parse_error_code(data)


_ERROR_CODE_STRINGS: Mapping[ErrorCode, str] = MappingProxyType({
    ErrorCode.UNKNOWN: "UNKNOWN",
    ErrorCode.INVALID_DIGEST: "INVALID_DIGEST",
    ErrorCode.INVALID_LENGTH: "INVALID_LENGTH",
    ErrorCode.INVALID_NAME: "INVALID_NAME",
    ErrorCode.INVALID_TAG: "INVALID_TAG",
    ErrorCode.UNKNOWN_REPOSITORY: "UNKNOWN_REPOSITORY",
    ErrorCode.UNKNOWN_MANIFEST: "UNKNOWN_MANIFEST",
    ErrorCode.INVALID_MANIFEST: "INVALID_MANIFEST",
    ErrorCode.UNVERIFIED_MANIFEST: "UNVERIFIED_MANIFEST",
    ErrorCode.UNKNOWN_LAYER: "UNKNOWN_LAYER",
    ErrorCode.UNKNOWN_LAYER_UPLOAD: "UNKNOWN_LAYER_UPLOAD",
    ErrorCode.UNTRUSTED_SIGNATURE: "UNTRUSTED_SIGNATURE",
})

_ERROR_CODE_MESSAGES: Mapping[ErrorCode, str] = MappingProxyType({
    ErrorCode.UNKNOWN: "unknown error",
    ErrorCode.INVALID_DIGEST: "provided digest did not match uploaded content",
    ErrorCode.INVALID_LENGTH: "provided length did not match content length",
    ErrorCode.INVALID_NAME: "manifest name did not match URI",
    ErrorCode.INVALID_TAG: "manifest tag did not match URI",
    ErrorCode.UNKNOWN_REPOSITORY: "repository not known to registry",
    ErrorCode.UNKNOWN_MANIFEST: "manifest not known",
    ErrorCode.INVALID_MANIFEST: "manifest is invalid",
    ErrorCode.UNVERIFIED_MANIFEST: "manifest failed signature validation",
    ErrorCode.UNKNOWN_LAYER: "referenced layer not available",
    ErrorCode.UNKNOWN_LAYER_UPLOAD: "cannot resume unknown layer upload",
    ErrorCode.UNTRUSTED_SIGNATURE: "manifest signed by untrusted source",
})


def _build_reverse_map() -> Mapping[str, ErrorCode]:
    reverse: dict[str, ErrorCode] = {}
    for code, text in _ERROR_CODE_STRINGS.items():
        if text in reverse:
            raise RuntimeError(f"Error code string {text!r} assigned to both {reverse[text].name} and {code.name}")
        reverse[text] = code
    missing = [code.name for code in ErrorCode if code not in _ERROR_CODE_STRINGS]
    if missing:
        raise RuntimeError(f"Error codes without a canonical string: {', '.join(missing)}")
    return MappingProxyType(reverse)


# Built once at import; read-only afterwards.
_STRING_TO_ERROR_CODE: Mapping[str, ErrorCode] = _build_reverse_map()


def error_code_string(code: Any) -> str:
    """Return the canonical identifier for code, or UNKNOWN's for anything unrecognized."""
    if isinstance(code, ErrorCode) and code in _ERROR_CODE_STRINGS:
        return _ERROR_CODE_STRINGS[code]
    return _ERROR_CODE_STRINGS[ErrorCode.UNKNOWN]


def error_code_message(code: Any) -> str:
    """Return the human-readable message for code, or UNKNOWN's for anything unrecognized."""
    if isinstance(code, ErrorCode) and code in _ERROR_CODE_MESSAGES:
        return _ERROR_CODE_MESSAGES[code]
    return _ERROR_CODE_MESSAGES[ErrorCode.UNKNOWN]


def parse_error_code(text: Any) -> ErrorCode:
    """
    Parse the error code string, returning ErrorCode.UNKNOWN if it is not known.

    Never raises: strings from third-party registries that fall outside the
    vocabulary degrade to UNKNOWN.
    """
    if isinstance(text, ErrorCode):
        return text
    if isinstance(text, str):
        code = _STRING_TO_ERROR_CODE.get(text)
        if code is not None:
            return code
    logger.debug(f"Unrecognized error code {text!r}, using {ErrorCode.UNKNOWN}")
    return ErrorCode.UNKNOWN
