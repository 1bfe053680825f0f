"""Token data model for scanned BibTeX entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical categories, in the order they appear in a well-formed entry."""

    ENTRY_MARKER = "entry_marker"
    ENTRY_TYPE = "entry_type"
    FIELD_LIST_OPEN = "field_list_open"
    CITATION_KEY = "citation_key"
    SEPARATOR = "separator"
    FIELD_NAME = "field_name"
    ASSIGN = "assign"
    FIELD_VALUE = "field_value"
    FIELD_LIST_CLOSE = "field_list_close"

    @property
    def is_delimiter(self) -> bool:
        """Whether tokens of this kind always carry a single delimiter character."""
        return self in _DELIMITER_TEXT

    @property
    def delimiter(self) -> str | None:
        """Delimiter character for delimiter kinds, ``None`` for text kinds."""
        return _DELIMITER_TEXT.get(self)


_DELIMITER_TEXT: dict[TokenKind, str] = {
    TokenKind.ENTRY_MARKER: "@",
    TokenKind.FIELD_LIST_OPEN: "{",
    TokenKind.SEPARATOR: ",",
    TokenKind.ASSIGN: "=",
    TokenKind.FIELD_LIST_CLOSE: "}",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A recognized lexical unit and the literal text it was built from."""

    kind: TokenKind
    text: str

    @classmethod
    def for_delimiter(cls, kind: TokenKind) -> Token:
        """Build the token for a single-character delimiter kind.

        Raises:
            ValueError: If ``kind`` is not a delimiter kind.
        """
        text = kind.delimiter
        if text is None:
            raise ValueError(f"{kind.name} is not a delimiter kind")
        return cls(kind, text)


def render_tokens(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into entry source.

    The result matches the scanned input except for dropped newlines and the
    whitespace trimmed around keys, names and values.
    """
    return "".join(token.text for token in tokens)
