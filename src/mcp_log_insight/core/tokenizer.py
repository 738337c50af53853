"""Lexical tokenizer for log highlighting.

Scans raw text left to right, independently of the detected format, and emits
classified spans. Spaces, tabs and line breaks are skipped; every other
character ends up in exactly one token. A backslash inside a quoted string
escapes the next character, line breaks included.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class TokenType(IntEnum):
    """Token ids; values are stable so display layers can key on them."""

    TIMESTAMP = 0
    LEVEL = 1
    LEVEL_ERROR = 2
    LEVEL_WARNING = 3
    LEVEL_INFO = 4
    LEVEL_DEBUG = 5
    SOURCE = 6
    MESSAGE = 7
    IP_ADDRESS = 8
    HTTP_METHOD = 9
    HTTP_STATUS = 10
    URL = 11
    NUMBER = 12
    BRACKET = 13
    STRING = 14
    SEPARATOR = 15


class TokenColor:
    """Color class names handed to the display layer."""

    OPERATOR = "operator"
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    KEYWORD2 = "keyword2"
    ERROR = "error"
    COMMENT = "comment"
    WORD = "word"


_TOKEN_NAMES: dict[int, str] = {
    TokenType.TIMESTAMP: "Timestamp",
    TokenType.LEVEL: "Level",
    TokenType.LEVEL_ERROR: "Error",
    TokenType.LEVEL_WARNING: "Warning",
    TokenType.LEVEL_INFO: "Info",
    TokenType.LEVEL_DEBUG: "Debug",
    TokenType.SOURCE: "Source",
    TokenType.MESSAGE: "Message",
    TokenType.IP_ADDRESS: "IP Address",
    TokenType.HTTP_METHOD: "HTTP Method",
    TokenType.HTTP_STATUS: "HTTP Status",
    TokenType.URL: "URL",
    TokenType.NUMBER: "Number",
    TokenType.BRACKET: "Bracket",
    TokenType.STRING: "String",
    TokenType.SEPARATOR: "Separator",
}

# Severity words are checked before HTTP verbs, so TRACE is a level here.
_WORD_CLASSES: tuple[tuple[frozenset[str], TokenType, str], ...] = (
    (frozenset({"ERROR", "ERR", "ERRO"}), TokenType.LEVEL_ERROR, TokenColor.ERROR),
    (frozenset({"WARN", "WARNING", "WRN"}), TokenType.LEVEL_WARNING, TokenColor.KEYWORD2),
    (frozenset({"INFO", "INF", "INFORMATION"}), TokenType.LEVEL_INFO, TokenColor.KEYWORD),
    (frozenset({"DEBUG", "DBG", "DEBU", "TRACE", "TRC"}), TokenType.LEVEL_DEBUG, TokenColor.COMMENT),
    (frozenset({"FATAL", "FTL", "CRITICAL", "CRIT"}), TokenType.LEVEL_ERROR, TokenColor.ERROR),
    (
        frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "CONNECT", "HTTP"}),
        TokenType.HTTP_METHOD,
        TokenColor.KEYWORD2,
    ),
)

_SPACES = frozenset(" \t")
_NEWLINES = frozenset("\r\n")
_BRACKETS = frozenset("[](){}<>")
_QUOTES = frozenset("\"'")
_NUMBER_EXTRA = frozenset(".:-/TZ+")
_WORD_EXTRA = frozenset("_-.")


@dataclass(frozen=True, slots=True)
class Token:
    """Half-open span ``[start, end)`` over the tokenized text."""

    type: TokenType
    start: int
    end: int
    color: str

    @property
    def name(self) -> str:
        return token_type_name(self.type)


class TokenSink(Protocol):
    """Anything that accepts tokens one at a time."""

    def add(self, token_type: TokenType, start: int, end: int, color: str) -> None:
        ...


class TokenList(list):
    """A plain list of Token objects that also works as a TokenSink."""

    def add(self, token_type: TokenType, start: int, end: int, color: str) -> None:
        self.append(Token(token_type, start, end, color))


def token_type_name(token_type: int) -> str:
    """Legend name for a token id ("Unknown" for ids outside the set)."""
    return _TOKEN_NAMES.get(token_type, "Unknown")


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ascii_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _classify_number(text: str) -> tuple[TokenType, str]:
    has_colon = ":" in text
    has_dash = "-" in text
    if text.count(".") == 3 and not has_colon and not has_dash:
        return TokenType.IP_ADDRESS, TokenColor.KEYWORD2
    if has_dash or has_colon:
        return TokenType.TIMESTAMP, TokenColor.KEYWORD
    return TokenType.NUMBER, TokenColor.NUMBER


def _classify_word(word: str) -> tuple[TokenType, str]:
    upper = word.upper()
    for words, token_type, color in _WORD_CLASSES:
        if upper in words:
            return token_type, color
    return TokenType.MESSAGE, TokenColor.WORD


def tokenize_into(text: str, sink: TokenSink) -> None:
    """Feed the tokens of ``text`` to ``sink`` in left-to-right order."""
    n = len(text)
    pos = 0
    while pos < n:
        while pos < n and text[pos] in _SPACES:
            pos += 1
        if pos >= n:
            break

        start = pos
        ch = text[pos]

        if ch in _NEWLINES:
            pos += 1
            # \r\n and \n\r count as one break
            if pos < n and text[pos] in _NEWLINES and text[pos] != ch:
                pos += 1
            continue

        if ch in _BRACKETS:
            pos += 1
            sink.add(TokenType.BRACKET, start, pos, TokenColor.OPERATOR)
            continue

        if ch in _QUOTES:
            pos += 1
            while pos < n and text[pos] != ch and text[pos] not in _NEWLINES:
                if text[pos] == "\\" and pos + 1 < n:
                    pos += 1
                pos += 1
            if pos < n and text[pos] == ch:
                pos += 1
            sink.add(TokenType.STRING, start, pos, TokenColor.STRING)
            continue

        if _is_ascii_digit(ch):
            while pos < n and (_is_ascii_digit(text[pos]) or text[pos] in _NUMBER_EXTRA):
                pos += 1
            token_type, color = _classify_number(text[start:pos])
            sink.add(token_type, start, pos, color)
            continue

        if _is_ascii_letter(ch) or ch == "_":
            while pos < n and (
                _is_ascii_letter(text[pos]) or _is_ascii_digit(text[pos]) or text[pos] in _WORD_EXTRA
            ):
                pos += 1
            token_type, color = _classify_word(text[start:pos])
            sink.add(token_type, start, pos, color)
            continue

        pos += 1
        sink.add(TokenType.SEPARATOR, start, pos, TokenColor.OPERATOR)


def tokenize(text: str) -> TokenList:
    """Return the token list for ``text``."""
    tokens = TokenList()
    tokenize_into(text, tokens)
    return tokens
