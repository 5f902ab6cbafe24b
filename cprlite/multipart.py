"""Parts of a multipart/form-data request body."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["File", "Buffer", "Part", "Multipart"]


@dataclass(frozen=True)
class File:
    """A file on disk whose content is uploaded as a part."""

    filepath: str


@dataclass(frozen=True)
class Buffer:
    """In-memory bytes uploaded as a part under the given file name."""

    data: bytes
    filename: str

    def __post_init__(self) -> None:
        if isinstance(self.data, str) or not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("only byte buffers can be used")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def datalen(self) -> int:
        return len(self.data)


class Part:
    """One named part: a plain value, a file, or an in-memory buffer."""

    def __init__(self, name: str, value: str | int | File | Buffer, content_type: str = "") -> None:
        self.name = name
        self.content_type = content_type
        self.data: bytes | None = None
        self.is_file = False
        self.is_buffer = False
        if isinstance(value, File):
            self.value = value.filepath
            self.is_file = True
        elif isinstance(value, Buffer):
            self.value = value.filename
            self.data = value.data
            self.is_buffer = True
        elif isinstance(value, str):
            self.value = value
        elif isinstance(value, int):
            self.value = str(int(value))
        else:
            raise TypeError(f"unsupported part value: {value!r}")

    @property
    def datalen(self) -> int:
        return len(self.data) if self.data is not None else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return (
            self.name,
            self.value,
            self.content_type,
            self.data,
            self.is_file,
            self.is_buffer,
        ) == (
            other.name,
            other.value,
            other.content_type,
            other.data,
            other.is_file,
            other.is_buffer,
        )

    def __repr__(self) -> str:
        kind = "file" if self.is_file else "buffer" if self.is_buffer else "value"
        return f"Part({self.name!r}, {kind}={self.value!r}, content_type={self.content_type!r})"


class Multipart:
    """An ordered collection of parts."""

    def __init__(self, parts: Iterable[Part] = ()) -> None:
        self.parts: list[Part] = list(parts)
        for part in self.parts:
            if not isinstance(part, Part):
                raise TypeError(f"not a Part: {part!r}")

    def __iter__(self) -> Iterator[Part]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        return f"Multipart({self.parts!r})"