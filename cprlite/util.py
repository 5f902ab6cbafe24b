"""Parsing helpers for HTTP header blocks, cookie lists and small string utilities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum

__all__ = [
    "CaseInsensitiveDict",
    "Cookie",
    "ParsedHeader",
    "split",
    "is_true",
    "parse_cookies",
    "parse_header",
    "secure_clear",
]

_TRAILING_WS = "\t\n\r "
_LEADING_WS = "\t "


class CaseInsensitiveDict(MutableMapping):
    """A mapping of strings whose keys compare without regard to case.

    The spelling of a key is the one used when it was first inserted.
    Iteration follows the case-insensitive order of the keys.
    """

    def __init__(self, data: Mapping | Iterable | None = None, **kwargs: str) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: str) -> str:
        return self._store[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        existing = self._store.get(folded)
        original = existing[0] if existing is not None else key
        self._store[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._store:
            raise KeyError(key)
        self._store.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._store):
            yield self._store[folded][0]

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return {k.lower(): v for k, v in self.items()} == {
            str(k).lower(): v for k, v in other.items()
        }

    def copy(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class _CookieField(IntEnum):
    DOMAIN = 0
    INCLUDE_SUBDOMAINS = 1
    PATH = 2
    HTTPS_ONLY = 3
    EXPIRES = 4
    NAME = 5
    VALUE = 6


_COOKIE_FIELD_COUNT = len(_CookieField)


@dataclass(frozen=True)
class Cookie:
    """A single cookie as kept by a cookie engine."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default_factory=lambda: datetime.fromtimestamp(0, tz=timezone.utc))


@dataclass
class ParsedHeader:
    """The outcome of parsing a raw header block."""

    header: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    status_line: str = ""
    reason: str = ""


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on a single character; a trailing empty field is not reported."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not to_split:
        return []
    tokens = to_split.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def is_true(s: str) -> bool:
    """Return whether the string reads "true", ignoring case."""
    return s.lower() == "true"


def _parse_expires(text: str) -> int:
    stripped = text.lstrip()
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        raise ValueError(f"invalid cookie expiry: {text!r}")
    return int(digits)


def parse_cookies(raw_cookies: Iterable[str]) -> list[Cookie]:
    """Parse tab-separated cookie lines in the Netscape cookie-file layout."""
    cookies = []
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens.extend([""] * (_COOKIE_FIELD_COUNT - len(tokens)))
        expires = _parse_expires(tokens[_CookieField.EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_CookieField.NAME],
                value=tokens[_CookieField.VALUE],
                domain=tokens[_CookieField.DOMAIN],
                include_subdomains=is_true(tokens[_CookieField.INCLUDE_SUBDOMAINS]),
                path=tokens[_CookieField.PATH],
                https_only=is_true(tokens[_CookieField.HTTPS_ONLY]),
                expires=datetime.fromtimestamp(expires, tz=timezone.utc),
            )
        )
    return cookies


def parse_header(headers: str) -> ParsedHeader:
    """Parse a raw response header block.

    Each status line starts a fresh header map, so after redirects only the
    headers of the last response remain.
    """
    result = ParsedHeader()
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_WS)
            result.status_line = line
            parts = _status_parts(line)
            if parts is not None:
                line = parts
                result.reason = line
            result.header = CaseInsensitiveDict()

        if line:
            key, sep, value = line.partition(":")
            if sep:
                result.header[key] = value.lstrip(_LEADING_WS).rstrip(_TRAILING_WS)
    return result


def _status_parts(line: str) -> str | None:
    """Return what follows the second blank in a status line, if any."""
    first = _find_blank(line, 0)
    if first < 0:
        return None
    second = _find_blank(line, first + 1)
    if second < 0:
        return None
    return line[second + 1:]


def _find_blank(text: str, start: int) -> int:
    positions = [p for p in (text.find(" ", start), text.find("\t", start)) if p >= 0]
    return min(positions) if positions else -1


def secure_clear(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros, then empty it."""
    if not isinstance(buffer, bytearray):
        raise TypeError("secure_clear needs a bytearray")
    if not buffer:
        return
    buffer[:] = bytes(len(buffer))
    del buffer[:]