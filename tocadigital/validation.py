"""Checks applied to fields read from the input files."""

from __future__ import annotations

from typing import Iterable

_DIGITS = frozenset("0123456789")


class InputError(Exception):
    """Base class for problems found in the input files."""

    default_message = "Erro na entrada"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class FormatError(InputError):
    """A field is not written in the expected format."""

    default_message = "Erro de formatação"


class InconsistencyError(InputError):
    """A field refers to something that does not exist."""

    default_message = "Inconsistências na entrada"


def check_digits(text: str) -> None:
    """Raise FormatError unless every character is a decimal digit."""
    if not set(text) <= _DIGITS:
        raise FormatError()


def check_decimal(text: str) -> None:
    """Raise FormatError unless every character is a digit or a dot."""
    if not set(text) <= _DIGITS | {"."}:
        raise FormatError()


def check_genre_exists(code: str, genres: Iterable) -> None:
    """Raise InconsistencyError unless some genre has this code."""
    if not any(genre.code == code for genre in genres):
        raise InconsistencyError()


def check_media_kind(kind: str) -> None:
    """Raise InconsistencyError unless the media kind is ``P`` or ``M``."""
    if kind not in ("P", "M"):
        raise InconsistencyError()


def check_user_kind(kind: str) -> None:
    """Raise InconsistencyError unless the user kind is ``P``, ``U`` or ``A``."""
    if kind not in ("P", "U", "A"):
        raise InconsistencyError()


def check_producer_exists(code: int, producers: Iterable) -> None:
    """Raise InconsistencyError unless some producer has this code."""
    if not any(producer.code == code for producer in producers):
        raise InconsistencyError()


def check_subscriber_exists(code: int, subscribers: Iterable) -> None:
    """Raise InconsistencyError unless some subscriber has this code.

    The offending code is printed before the error is raised.
    """
    if not any(subscriber.code == code for subscriber in subscribers):
        print(code)
        raise InconsistencyError()


def check_media_exists(code: int, media: Iterable) -> None:
    """Raise InconsistencyError unless some media item has this code."""
    if not any(item.code == code for item in media):
        raise InconsistencyError()