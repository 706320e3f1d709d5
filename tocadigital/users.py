"""Users of the platform: subscribers' common base, producers, artists and podcasters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, TextIO

from .media import Media, Podcast, format_number


@dataclass
class User:
    """Anyone registered on the platform, identified by a numeric code."""

    name: str
    code: int = 0


def _media_lines(media: Media) -> List[str]:
    return [
        f"Nome: {media.name}",
        f"Codigo: {media.code}",
        f"Duracao: {format_number(media.duration)}",
        f"Ano Lancamento: {media.year}",
        f"Genero: {media.genre.name}",
        f"Sigla: {media.genre.code}",
    ]


@dataclass
class Producer(User):
    """A user who publishes media."""

    media: List[Media] = field(default_factory=list)

    def add_media(self, media: Media) -> None:
        """Credit a media item to this producer."""
        self.media.append(media)

    def describe_products(self) -> str:
        """Return the descriptions of every item this producer published."""
        return "".join(item.describe() for item in self.media)

    def sort_media(self) -> None:
        """Order the producer's media by name."""
        self.media.sort(key=lambda item: item.name)

    def write_to(self, stream: TextIO) -> None:
        """Write a detailed listing of the producer's media to a stream."""
        for item in self.media:
            stream.write("\n".join(_media_lines(item)) + "\n")


@dataclass
class Artist(Producer):
    """A producer of songs, who may release albums."""

    albums: List[Any] = field(default_factory=list)

    def add_album(self, album: Any) -> None:
        """Record an album released by this artist."""
        self.albums.append(album)


@dataclass
class Podcaster(Producer):
    """A producer of podcasts."""

    podcasts: List[Podcast] = field(default_factory=list)

    def add_podcast(self, podcast: Podcast) -> None:
        """Record a podcast made by this podcaster."""
        self.podcasts.append(podcast)

    def write_to(self, stream: TextIO) -> None:
        """Write the media listing, each entry with its podcast's season count.

        The n-th media entry is paired with the n-th recorded podcast; an
        IndexError is raised when there are fewer podcasts than media.
        """
        for index, item in enumerate(self.media):
            seasons = self.podcasts[index].seasons
            lines = _media_lines(item)
            lines.append(f"Quantidade de temporadas: {seasons}")
            stream.write("\n".join(lines) + "\n")