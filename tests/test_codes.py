"""
Tests for the error code vocabulary.

Validates the canonical string and message tables, lenient parsing and the
text encoding used on the wire.
"""
from __future__ import annotations

import pytest

from registry_errors.codes import (
    ErrorCode,
    error_code_message,
    error_code_string,
    parse_error_code,
)

CANONICAL_STRINGS = [
    "UNKNOWN",
    "INVALID_DIGEST",
    "INVALID_LENGTH",
    "INVALID_NAME",
    "INVALID_TAG",
    "UNKNOWN_REPOSITORY",
    "UNKNOWN_MANIFEST",
    "INVALID_MANIFEST",
    "UNVERIFIED_MANIFEST",
    "UNKNOWN_LAYER",
    "UNKNOWN_LAYER_UPLOAD",
    "UNTRUSTED_SIGNATURE",
]


class TestCanonicalStrings:
    """Test the code to string mapping."""

    def test_vocabulary_is_fixed(self):
        """Test that every code has exactly the expected canonical string."""
        assert [error_code_string(code) for code in ErrorCode] == CANONICAL_STRINGS

    def test_strings_are_unique(self):
        """Test that no two codes share a canonical string."""
        strings = [str(code) for code in ErrorCode]
        assert len(set(strings)) == len(strings)

    def test_str_is_canonical_string(self):
        """Test that str() renders the canonical string, not the member repr."""
        assert str(ErrorCode.UNKNOWN_LAYER_UPLOAD) == "UNKNOWN_LAYER_UPLOAD"
        assert f"{ErrorCode.INVALID_TAG}" == "INVALID_TAG"

    @pytest.mark.parametrize("value", [None, 3, "INVALID_DIGEST", object()])
    def test_non_codes_render_as_unknown(self, value):
        """Test that anything that is not an ErrorCode renders as UNKNOWN."""
        assert error_code_string(value) == "UNKNOWN"

    def test_default_code_is_unknown(self):
        """Test that UNKNOWN is the first member of the enumeration."""
        assert list(ErrorCode)[0] is ErrorCode.UNKNOWN


class TestMessages:
    """Test the canonical messages."""

    def test_known_messages(self):
        """Test a sample of canonical messages."""
        assert ErrorCode.INVALID_DIGEST.message == "provided digest did not match uploaded content"
        assert ErrorCode.UNKNOWN_MANIFEST.message == "manifest not known"
        assert ErrorCode.UNKNOWN_LAYER_UPLOAD.message == "cannot resume unknown layer upload"
        assert ErrorCode.UNTRUSTED_SIGNATURE.message == "manifest signed by untrusted source"

    def test_unknown_message(self):
        """Test the fallback message."""
        assert ErrorCode.UNKNOWN.message == "unknown error"
        assert error_code_message(None) == "unknown error"
        assert error_code_message(42) == "unknown error"

    def test_every_code_has_a_message(self):
        """Test that every code has a non-empty message."""
        for code in ErrorCode:
            assert code.message


class TestParse:
    """Test string to code parsing."""

    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_parse_inverts_canonical_string(self, code):
        """Test parse(str(code)) == code for every code."""
        assert parse_error_code(error_code_string(code)) is code
        assert ErrorCode.parse(str(code)) is code

    @pytest.mark.parametrize("text", ["", "NOT_A_CODE", "invalid_digest", " INVALID_DIGEST", "0"])
    def test_unrecognized_strings_yield_unknown(self, text):
        """Test that unknown strings never raise."""
        assert parse_error_code(text) is ErrorCode.UNKNOWN

    @pytest.mark.parametrize("value", [None, 1, b"INVALID_DIGEST", ["INVALID_DIGEST"]])
    def test_non_strings_yield_unknown(self, value):
        """Test that non-string input degrades to UNKNOWN."""
        assert parse_error_code(value) is ErrorCode.UNKNOWN

    def test_parse_accepts_codes(self):
        """Test that parsing an ErrorCode returns it unchanged."""
        assert parse_error_code(ErrorCode.INVALID_NAME) is ErrorCode.INVALID_NAME


class TestTextEncoding:
    """Test marshal_text / unmarshal_text."""

    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_marshal_unmarshal(self, code):
        """Test that every code survives the text encoding."""
        data = code.marshal_text()
        assert data == str(code).encode()
        assert ErrorCode.unmarshal_text(data) is code

    def test_unmarshal_unrecognized_bytes(self):
        """Test that unrecognized and undecodable bytes yield UNKNOWN."""
        assert ErrorCode.unmarshal_text(b"BLOB_UNKNOWN") is ErrorCode.UNKNOWN
        assert ErrorCode.unmarshal_text(b"\xff\xfe") is ErrorCode.UNKNOWN
        assert ErrorCode.unmarshal_text(bytearray(b"INVALID_LENGTH")) is ErrorCode.INVALID_LENGTH

    def test_unmarshal_str(self):
        """Test that str input is accepted too."""
        assert ErrorCode.unmarshal_text("INVALID_MANIFEST") is ErrorCode.INVALID_MANIFEST


class TestOrdering:
    """Test ordering and integer isolation."""

    def test_codes_are_ordered_by_declaration(self):
        """Test that codes sort in declaration order."""
        assert ErrorCode.UNKNOWN < ErrorCode.INVALID_DIGEST < ErrorCode.UNTRUSTED_SIGNATURE
        assert sorted(reversed(list(ErrorCode))) == list(ErrorCode)
        assert ErrorCode.UNKNOWN_LAYER >= ErrorCode.UNKNOWN_LAYER

    def test_codes_are_not_integers(self):
        """Test that codes never compare equal to their position."""
        assert ErrorCode.UNKNOWN != 0
        assert ErrorCode.INVALID_DIGEST != 1
        with pytest.raises(TypeError):
            ErrorCode.UNKNOWN < 1
