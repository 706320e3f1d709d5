"""Media items of the catalogue: genres, songs and podcasts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional, TextIO


def format_number(value: float) -> str:
    """Render a number the way a default-configured output stream does.

    Integers are written as they are. Floats use six significant digits,
    drop trailing zeros and switch to exponent notation for very large or
    very small magnitudes.
    """
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


@dataclass(frozen=True)
class Genre:
    """A musical or editorial genre, identified by a short code."""

    name: str
    code: str


class MediaKind(enum.Enum):
    """The two kinds of media the catalogue holds."""

    PODCAST = "Podcast"
    SONG = "Música"

    @property
    def code(self) -> str:
        """The one-letter code used for this kind in input files."""
        return "P" if self is MediaKind.PODCAST else "M"

    @classmethod
    def from_code(cls, code: str) -> "MediaKind":
        """Return the kind for an input code, ``"P"`` or ``"M"``."""
        for kind in cls:
            if kind.code == code:
                return kind
        raise ValueError(f"unknown media kind code: {code!r}")


@dataclass
class Media:
    """A published item of the catalogue."""

    name: str
    code: int = 0
    genre: Genre = Genre("", "")
    duration: float = 0.0
    year: int = 0

    kind: ClassVar[Optional[MediaKind]] = None

    @property
    def kind_name(self) -> str:
        """The display name of this item's kind, empty when it has none."""
        return self.kind.value if self.kind is not None else ""

    def describe(self) -> str:
        """Return a short human-readable description of the item."""
        return ""

    def write_to(self, stream: TextIO) -> None:
        """Write the item's description to a text stream."""
        stream.write(self.describe())


@dataclass
class Song(Media):
    """A song, possibly part of an album."""

    kind: ClassVar[Optional[MediaKind]] = MediaKind.SONG

    def describe(self) -> str:
        return (
            f"Nome: {self.name}\n"
            f"Duracao: {format_number(self.duration)}\n"
            f"Ano de Lancamento: {self.year}\n"
        )

    def write_to(self, stream: TextIO) -> None:
        stream.write(self.describe())


@dataclass
class Podcast(Media):
    """A podcast with a number of seasons."""

    seasons: int = 0

    kind: ClassVar[Optional[MediaKind]] = MediaKind.PODCAST

    def describe(self) -> str:
        return (
            f"Nome: {self.name}\n"
            f"Quantidade de temporadas: {self.seasons}\n"
        )

    def write_to(self, stream: TextIO) -> None:
        stream.write(self.describe())