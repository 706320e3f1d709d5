"""Albums, which group songs released together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .media import Song


@dataclass
class Album:
    """A named collection of songs."""

    name: str
    duration: int = 0
    year: int = 0
    song_count: int = 0
    songs: List[Song] = field(default_factory=list)

    def add_song(self, song: Song) -> None:
        """Append a song to the album."""
        self.songs.append(song)

    def contains(self, name: str) -> bool:
        """Tell whether the album holds a song with the given name."""
        return any(song.name == name for song in self.songs)