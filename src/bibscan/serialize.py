"""JSON serialization of token sequences."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import msgspec

from .exceptions import InvalidDataError
from .tokens import Token

logger = logging.getLogger(__name__)

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(list[Token])


def encode_tokens(tokens: Sequence[Token]) -> bytes:
    """Encode tokens as a JSON array of ``{"kind": ..., "text": ...}`` objects."""
    return _encoder.encode(list(tokens))


def decode_tokens(data: bytes | str) -> list[Token]:
    """Decode a JSON token array produced by :func:`encode_tokens`.

    Args:
        data: JSON document holding the token array

    Returns:
        The decoded tokens in their serialized order

    Raises:
        InvalidDataError: If the payload is not valid JSON or has the wrong shape
    """
    try:
        tokens = _decoder.decode(data)
    except msgspec.ValidationError as e:
        raise InvalidDataError(f"Invalid token data: {e}") from e
    except msgspec.DecodeError as e:
        raise InvalidDataError(f"Invalid JSON in token data: {e}") from e

    for index, token in enumerate(tokens):
        expected = token.kind.delimiter
        if expected is not None and token.text != expected:
            raise InvalidDataError(
                f"Expected {expected!r} for {token.kind.name} at index {index}, got {token.text!r}"
            )

    logger.debug("Decoded %d tokens", len(tokens))
    return tokens
