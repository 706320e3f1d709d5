"""Subscribers and their lists of favourite media."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .media import Media, MediaKind
from .users import User


@dataclass
class Subscriber(User):
    """A user who listens to media and keeps a list of favourites."""

    favorites: List[Media] = field(default_factory=list)

    def add_favorite(self, media: Media) -> None:
        """Append a media item to the favourites."""
        self.favorites.append(media)

    def remove_favorite(self, media: Media) -> None:
        """Remove the last occurrence of this exact item, if present."""
        for index in range(len(self.favorites) - 1, -1, -1):
            if self.favorites[index] is media:
                del self.favorites[index]
                return

    def describe_favorites(self) -> str:
        """Return the descriptions of all favourites, in order."""
        return "".join(item.describe() for item in self.favorites)

    def count_podcasts(self) -> int:
        """Return how many favourites are podcasts."""
        return sum(1 for item in self.favorites if item.kind is MediaKind.PODCAST)

    def sort_favorites(self) -> None:
        """Put podcasts first, then everything else, each part ordered by code."""
        self.favorites.sort(
            key=lambda item: (item.kind is not MediaKind.PODCAST, item.code)
        )