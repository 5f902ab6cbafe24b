"""Key/value containers for query parameters, form pairs and cookies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Generic, TypeVar, Union
from urllib.parse import quote

__all__ = ["Parameter", "Pair", "CurlContainer", "Cookies"]


def _escape(text: str) -> str:
    return quote(text, safe="")


@dataclass
class Parameter:
    """A single URL query parameter."""

    key: str
    value: str


@dataclass
class Pair:
    """A single form field of an URL-encoded payload."""

    key: str
    value: str


T = TypeVar("T", bound=Union[Parameter, Pair])


class CurlContainer(Generic[T]):
    """An ordered list of key/value items rendered as ``key=value&...``.

    When ``encode`` is set, keys and values are percent-encoded.
    """

    def __init__(self, items: Iterable[T] = (), *, encode: bool = True) -> None:
        self.encode = encode
        self._items: list[T] = []
        self.add(items)

    def add(self, *args: T | Iterable[T]) -> None:
        """Append items, each given alone or inside an iterable."""
        for arg in args:
            if isinstance(arg, (Parameter, Pair)):
                self._items.append(arg)
                continue
            if isinstance(arg, (str, bytes)):
                raise TypeError("expected a Parameter, a Pair or an iterable of them")
            for item in arg:
                if not isinstance(item, (Parameter, Pair)):
                    raise TypeError(f"not a Parameter or Pair: {item!r}")
                self._items.append(item)

    def content(self) -> str:
        """Return the items joined as ``key=value`` separated by ``&``."""
        convert = _escape if self.encode else str
        return "&".join(f"{convert(item.key)}={convert(item.value)}" for item in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, encode={self.encode})"


class Cookies(MutableMapping):
    """Cookies to send, kept in key order.

    Values are percent-encoded in :meth:`encoded` unless ``encode`` is off.
    """

    def __init__(
        self,
        data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        *,
        encode: bool = True,
    ) -> None:
        self.encode = encode
        self._map: dict[str, str] = {}
        if data is not None:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        return self._map[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._map[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._map:
            raise KeyError(key)
        self._map.pop(key)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def encoded(self) -> str:
        """Return the cookies as the value of a Cookie request header."""
        convert = _escape if self.encode else str
        return "; ".join(f"{name}={convert(self._map[name])}" for name in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r}, encode={self.encode})"