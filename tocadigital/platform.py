"""The digital platform: the catalogue, its users and the loaders for input files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, TextIO

from .albums import Album
from .media import Genre, Media, MediaKind, Podcast, Song
from .subscribers import Subscriber
from .users import Artist, Podcaster, Producer
from .validation import (
    FormatError,
    InconsistencyError,
    check_decimal,
    check_digits,
    check_genre_exists,
    check_media_exists,
    check_media_kind,
    check_producer_exists,
    check_subscriber_exists,
    check_user_kind,
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_LEADING_INT = re.compile(r"\d+")
_LEADING_FLOAT = re.compile(r"\d*\.?\d*")


def _data_lines(stream: Iterable[str]) -> Iterable[str]:
    """Yield the lines after the header, without their line terminator."""
    lines = iter(stream)
    next(lines, None)
    for line in lines:
        yield line.rstrip("\n")


def _fields(line: str, count: int, *, rest: bool = False) -> List[str]:
    """Split a ``;``-separated line into ``count`` fields, padding with blanks.

    With ``rest`` the last field holds everything that remains of the line.
    """
    parts = line.split(";", count - 1) if rest else line.split(";")[:count]
    return parts + [""] * (count - len(parts))


def _pieces(text: str) -> List[str]:
    """Split a comma list; a trailing comma does not produce an empty item."""
    if not text:
        return []
    parts = text.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise FormatError()
    return int(match.group())


def _to_float(text: str) -> float:
    prefix = _LEADING_FLOAT.match(text).group()
    if prefix in ("", "."):
        raise FormatError()
    return float(prefix)


def read_genres(path: str) -> List[Genre]:
    """Read a genre file: a header, then ``code;name`` lines.

    The name runs to the end of its line. An unreadable file raises OSError.
    """
    with open(path, encoding="utf-8") as handle:
        genres = []
        for line in _data_lines(handle):
            code, _, name = line.partition(";")
            genres.append(Genre(name, code))
        return genres


@dataclass
class Platform:
    """A streaming platform holding genres, users, media and albums."""

    name: str = ""
    subscribers: List[Subscriber] = field(default_factory=list)
    genres: List[Genre] = field(default_factory=list)
    media: List[Media] = field(default_factory=list)
    producers: List[Producer] = field(default_factory=list)
    albums: List[Album] = field(default_factory=list)

    def genres_named(self, name: str) -> List[Genre]:
        """Return the genres whose name is exactly ``name``."""
        return [genre for genre in self.genres if genre.name == name]

    def describe_genre(self, name: str) -> str:
        """Describe every genre with this name, one block per genre."""
        return "".join(
            f"Nome: {genre.name}\nSigla: {genre.code}\n\n"
            for genre in self.genres_named(name)
        )

    def load_genres(self, stream: TextIO) -> None:
        """Load genres from ``code;name`` lines that follow a header."""
        for line in _data_lines(stream):
            code, name = _fields(line, 2)
            self.genres.append(Genre(name, code))

    def load_users(self, stream: TextIO) -> None:
        """Load users from ``code;kind;name`` lines that follow a header.

        Kind ``U`` is a subscriber, ``A`` an artist and ``P`` a podcaster.
        """
        for line in _data_lines(stream):
            code_text, kind, name = _fields(line, 3)
            check_digits(code_text)
            check_user_kind(kind)
            code = _to_int(code_text)
            if kind == "U":
                self.subscribers.append(Subscriber(name, code))
            elif kind == "P":
                self.producers.append(Podcaster(name, code))
            elif kind == "A":
                self.producers.append(Artist(name, code))

    def _media_at(self, code: int) -> Media:
        """Return the media item in position ``code``, counting from one."""
        if not 1 <= code <= len(self.media):
            raise InconsistencyError()
        return self.media[code - 1]

    def _album_for(self, album_code: str, duration: str, year: int) -> None:
        if album_code and not any(album.name == album_code for album in self.albums):
            self.albums.append(Album(album_code, _to_int(duration), year, 0))

    def load_media(self, stream: TextIO) -> None:
        """Load media lines that follow a header.

        Each line holds code, name, kind, producers, duration, genres,
        seasons, album, album code and year, separated by ``;``.
        """
        for line in _data_lines(stream):
            (
                code_text,
                name,
                kind,
                producer_list,
                duration,
                genre_list,
                seasons,
                _album_name,
                album_code,
                year_text,
            ) = _fields(line, 10, rest=True)
            check_digits(code_text)
            check_media_kind(kind)
            duration = duration.replace(",", ".")
            check_decimal(duration)
            check_digits(seasons)
            check_digits(album_code)
            check_digits(year_text)

            genre_code = genre_list.split(",", 1)[0]
            check_genre_exists(genre_code, self.genres)

            for genre in self.genres:
                if genre.code != genre_code:
                    continue
                media_kind = MediaKind.from_code(kind)
                if media_kind is MediaKind.PODCAST:
                    self.media.append(
                        Podcast(
                            name,
                            code=_to_int(code_text),
                            genre=genre,
                            duration=_to_float(duration),
                            year=_to_int(year_text),
                            seasons=_to_int(seasons),
                        )
                    )
                else:
                    song = Song(
                        name,
                        code=_to_int(code_text),
                        genre=genre,
                        duration=_to_float(duration),
                        year=_to_int(year_text),
                    )
                    self.media.append(song)
                    self._album_for(album_code, duration, song.year)
                    for album in self.albums:
                        if album.name == album_code:
                            album.add_song(song)

            for piece in _pieces(producer_list):
                if piece.startswith(" "):
                    piece = piece[1:]
                check_digits(piece)
                producer_code = _to_int(piece)
                check_producer_exists(producer_code, self.producers)
                for producer in self.producers:
                    if producer.code == producer_code:
                        producer.add_media(self._media_at(_to_int(code_text)))

    def load_favorites(self, stream: TextIO) -> None:
        """Load ``subscriber;media,media,...`` lines that follow a header.

        Repeated media are kept once. Afterwards every subscriber's
        favourites are ordered podcasts first, each part by code.
        """
        for line in _data_lines(stream):
            code_text, _, rest = line.partition(";")
            check_digits(code_text)
            subscriber_code = _to_int(code_text)
            check_subscriber_exists(subscriber_code, self.subscribers)
            for piece in _pieces(rest):
                if not piece or not self.media:
                    continue
                check_digits(piece)
                wanted = _to_int(piece)
                check_media_exists(wanted, self.media)
                for item in self.media:
                    if item.code != wanted:
                        continue
                    for subscriber in self.subscribers:
                        if subscriber.code != subscriber_code:
                            continue
                        if all(fav.code != wanted for fav in subscriber.favorites):
                            subscriber.add_favorite(self._media_at(wanted))

        for subscriber in self.subscribers:
            subscriber.sort_favorites()

    def sort_producers(self) -> None:
        """Order producers by name, ignoring the case of ASCII letters."""
        self.producers.sort(key=lambda producer: producer.name.translate(_ASCII_LOWER))