"""Tests for token JSON serialization."""

import json

import pytest

from bibscan.exceptions import InvalidDataError
from bibscan.scanner import scan
from bibscan.serialize import decode_tokens, encode_tokens
from bibscan.tokens import Token, TokenKind


def test_encode_tokens_shape():
    """Test that tokens encode as kind/text objects."""
    data = json.loads(encode_tokens(scan("@misc{k, year = 2001}")))

    assert data[0] == {"kind": "entry_marker", "text": "@"}
    assert data[-2] == {"kind": "field_value", "text": "2001"}
    assert data[-1] == {"kind": "field_list_close", "text": "}"}


def test_decode_encoded_tokens():
    """Test decoding the output of a real scan."""
    tokens = scan('@article{mrx05,\npublisher = "nob" # "ody",\nYEAR = 2005,\n}')

    assert decode_tokens(encode_tokens(tokens)) == tokens


def test_decode_tokens_from_str():
    """Test that decoding accepts text as well as bytes."""
    payload = '[{"kind": "citation_key", "text": "mrx05"}]'

    assert decode_tokens(payload) == [Token(TokenKind.CITATION_KEY, "mrx05")]


def test_decode_tokens_invalid_json():
    """Test that malformed JSON raises InvalidDataError."""
    with pytest.raises(InvalidDataError, match="Invalid JSON"):
        decode_tokens(b"[{")


def test_decode_tokens_unknown_kind():
    """Test that an unknown kind is rejected."""
    with pytest.raises(InvalidDataError, match="Invalid token data"):
        decode_tokens(b'[{"kind": "preamble", "text": "x"}]')


def test_decode_tokens_wrong_shape():
    """Test that a non-array payload is rejected."""
    with pytest.raises(InvalidDataError, match="Invalid token data"):
        decode_tokens(b'{"kind": "assign", "text": "="}')


def test_decode_tokens_bad_delimiter_text():
    """Test that a delimiter kind with the wrong text is rejected."""
    with pytest.raises(InvalidDataError, match="Expected '=' for ASSIGN at index 1"):
        decode_tokens(
            b'[{"kind": "field_name", "text": "a"}, {"kind": "assign", "text": ":"}]'
        )
