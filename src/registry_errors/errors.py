"""
Coded registry errors and the error envelope.

An Error pairs an ErrorCode with a message and optional detail. Errors
collects them in push order for a single request; it is not safe to share
one instance between concurrent requests without external locking.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Union

from .codes import ErrorCode, error_code_string
from .models import ErrorEnvelope, ErrorPayload

logger = logging.getLogger(__name__)

__all__ = ["Error", "Errors"]

_UNSET: Any = object()


class Error(Exception):
    """
    Wrapper around an ErrorCode with an optional detail.

    The message defaults to the code's canonical message. Instances are
    values: attributes are read-only and replace() builds a modified copy.
    """

    def __init__(
        self,
        code: ErrorCode = ErrorCode.UNKNOWN,
        message: Optional[str] = None,
        detail: Any = None,
    ):
        self._code = code
        self._message = code.message if message is None else message
        self._detail = detail
        super().__init__(self._code, self._message, self._detail)

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def detail(self) -> Any:
        return self._detail

    def replace(self, code: Any = _UNSET, message: Any = _UNSET, detail: Any = _UNSET) -> Error:
        """Return a copy with the given fields replaced."""
        return Error(
            code=self._code if code is _UNSET else code,
            message=self._message if message is _UNSET else message,
            detail=self._detail if detail is _UNSET else detail,
        )

    def __str__(self) -> str:
        label = error_code_string(self._code).replace("_", " ").lower()
        return f"{label}: {self._message}"

    def __repr__(self) -> str:
        return f"Error(code={self._code.name}, message={self._message!r}, detail={self._detail!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self._code, self._message, self._detail) == (other._code, other._message, other._detail)

    def __hash__(self) -> int:
        return hash((self._code, self._message))

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self._code, message=self._message, detail=self._detail)

    @classmethod
    def from_payload(cls, payload: ErrorPayload) -> Error:
        return cls(code=payload.code, message=payload.message, detail=payload.detail)


class Errors(Exception):
    """
    Envelope for multiple errors with a few sugar methods for use within
    request handlers.
    """

    def __init__(self, errors: Optional[List[Error]] = None):
        super().__init__()
        self._errors: List[Error] = []
        for err in errors or ():
            self.push_err(err)

    def push(self, code: ErrorCode, detail: Any = None) -> None:
        """
        Push an error for code with its canonical message and an optional detail.

        At most one detail can be given; passing a second one fails the call
        itself. An exception given as detail is stored as its text so that
        only its description reaches the serialized envelope.
        """
        if isinstance(detail, BaseException):
            detail = str(detail)
        self.push_err(Error(code=code, message=code.message, detail=detail))

    def push_err(self, err: BaseException) -> None:
        """
        Push an exception onto the error stack.

        Error instances are kept as is; anything else is wrapped in an
        UNKNOWN Error carrying the exception's text.
        """
        if not isinstance(err, Error):
            err = Error(message=str(err))
        logger.debug(f"Pushed {err.code} error: {err.message}")
        self._errors.append(err)

    def clear(self) -> None:
        """Clear the errors."""
        del self._errors[:]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Error]:
        return iter(self._errors)

    def __getitem__(self, index: int) -> Error:
        return self._errors[index]

    def __str__(self) -> str:
        if not self._errors:
            return "<nil>"
        if len(self._errors) == 1:
            return str(self._errors[0])
        return "errors:\n" + "".join(f"{err}\n" for err in self._errors)

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"

    def __reduce__(self):
        return (self.__class__, (list(self._errors),))

    def to_payload(self) -> ErrorEnvelope:
        return ErrorEnvelope(errors=[err.to_payload() for err in self._errors])

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to the JSON error response body."""
        return self.to_payload().model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_payload(cls, envelope: ErrorEnvelope) -> Errors:
        return cls([Error.from_payload(payload) for payload in envelope.errors])

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> Errors:
        """
        Load an error response body.

        Raises:
            pydantic.ValidationError: If data is not a valid envelope
        """
        return cls.from_payload(ErrorEnvelope.model_validate_json(data))
