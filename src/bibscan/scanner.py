"""Single-pass scanner turning a BibTeX entry into a token sequence."""

from __future__ import annotations

import logging
from typing import NamedTuple

from .config import ScannerConfig
from .exceptions import UnterminatedContentError
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    """What the scanner does when it meets a structural character.

    ``flush`` is the kind the pending buffer is emitted as before ``emit``;
    when ``flush_empty`` is false a blank buffer is not emitted at all.
    """

    flush: TokenKind | None
    emit: TokenKind
    flush_empty: bool = True


def classify(
    char: str,
    last_kind: TokenKind | None,
    *,
    is_final: bool = False,
    nested: bool = False,
) -> Transition | None:
    """Decide how ``char`` is handled given the kind of the last emitted token.

    Args:
        char: The character being scanned
        last_kind: Kind of the most recently emitted token, ``None`` at start
        is_final: Whether ``char`` is the last significant character of the input
        nested: Whether the scanner is inside braces opened within a value

    Returns:
        The transition to apply, or ``None`` when ``char`` belongs in the buffer
    """
    if nested:
        return None

    if char == "@":
        return Transition(None, TokenKind.ENTRY_MARKER)

    if char == "{" and last_kind is TokenKind.ENTRY_MARKER:
        return Transition(TokenKind.ENTRY_TYPE, TokenKind.FIELD_LIST_OPEN)

    if char == ",":
        if last_kind is TokenKind.FIELD_LIST_OPEN:
            return Transition(TokenKind.CITATION_KEY, TokenKind.SEPARATOR)
        return Transition(TokenKind.FIELD_VALUE, TokenKind.SEPARATOR)

    if char == "=":
        return Transition(TokenKind.FIELD_NAME, TokenKind.ASSIGN)

    if char == "}" and is_final:
        # Final field may omit its trailing comma
        return Transition(TokenKind.FIELD_VALUE, TokenKind.FIELD_LIST_CLOSE, flush_empty=False)

    return None


class Scanner:
    """Scans one entry at a time, keeping its buffer and state local to the scan."""

    def __init__(self, config: ScannerConfig | None = None) -> None:
        self.config = config or ScannerConfig()
        self._buffer: list[str] = []
        self._tokens: list[Token] = []
        self._last_kind: TokenKind | None = None
        self._depth = 0

    @property
    def last_kind(self) -> TokenKind | None:
        """Kind of the last token emitted by the most recent scan."""
        return self._last_kind

    def scan(self, text: str) -> list[Token]:
        """Scan ``text`` into tokens.

        Args:
            text: Source of a single BibTeX entry

        Returns:
            Tokens in the order their lexical units appear in ``text``

        Raises:
            UnterminatedContentError: If input ends with unflushed buffer content
        """
        self._reset()
        logger.debug("Scanning %d characters", len(text))

        close_at = len(text.rstrip()) - 1

        for index, char in enumerate(text):
            if char == "\n":
                continue

            # Whitespace trailing the closing brace
            if index > close_at and self._last_kind is TokenKind.FIELD_LIST_CLOSE:
                continue

            transition = classify(
                char,
                self._last_kind,
                is_final=index == close_at,
                nested=self._depth > 0,
            )
            if transition is None:
                self._push(char)
            else:
                self._apply(transition)

        if self._buffer:
            raise UnterminatedContentError("".join(self._buffer))

        tokens = self._tokens
        logger.debug("Scanned %d tokens", len(tokens))
        return tokens

    def _reset(self) -> None:
        self._buffer = []
        self._tokens = []
        self._last_kind = None
        self._depth = 0

    def _push(self, char: str) -> None:
        if self.config.track_brace_depth:
            if char == "{":
                self._depth += 1
            elif char == "}" and self._depth > 0:
                self._depth -= 1
        self._buffer.append(char)

    def _apply(self, transition: Transition) -> None:
        if transition.flush is not None:
            text = "".join(self._buffer).strip()
            if text or transition.flush_empty:
                self._emit(Token(transition.flush, text))
            self._buffer.clear()
        self._emit(Token.for_delimiter(transition.emit))

    def _emit(self, token: Token) -> None:
        self._tokens.append(token)
        self._last_kind = token.kind


def scan(text: str, config: ScannerConfig | None = None) -> list[Token]:
    """Scan a BibTeX entry into an ordered list of tokens.

    Args:
        text: Source of a single BibTeX entry
        config: Optional scanner configuration, defaults to one-level braces

    Returns:
        Tokens in input order

    Raises:
        UnterminatedContentError: If input ends with unflushed buffer content
    """
    return Scanner(config).scan(text)
