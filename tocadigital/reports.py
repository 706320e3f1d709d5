"""Reports produced from a loaded platform: backup, producers, favourites and statistics."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List, Union

from .media import Podcast, format_number
from .platform import Platform

BACKUP_FILE = "backup.txt"
PRODUCERS_FILE = "produtores.csv"
FAVORITES_FILE = "favorito.csv"
STATISTICS_FILE = "estatisticas.txt"

_TOP = 10


def _text(lines: List[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def backup_report(platform: Platform) -> str:
    """Return a listing of every user and every media item."""
    lines = ["Usuários:"]
    lines.extend(f"{user.code};{user.name}" for user in platform.subscribers)
    lines.extend(f"{user.code};{user.name}" for user in platform.producers)
    lines.extend(["", "Midias:"])
    for item in platform.media:
        credits = "".join(
            f"{producer.name},"
            for producer in platform.producers
            for produced in producer.media
            if produced.code == item.code
        )
        seasons = f"{item.seasons};" if isinstance(item, Podcast) else ""
        albums = "".join(
            album.name
            for album in platform.albums
            for song in album.songs
            if song.name == item.name
        )
        lines.append(
            f"{item.name};{item.kind_name};{credits};"
            f"{format_number(item.duration)};{item.genre.name};"
            f"{seasons}{albums};{item.year}"
        )
    return _text(lines)


def producers_report(platform: Platform) -> str:
    """Return each producer with the names of its media.

    Producers are put in case-insensitive name order and each producer's
    media in name order; both orderings are kept on the platform.
    """
    platform.sort_producers()
    lines = []
    for producer in platform.producers:
        producer.sort_media()
        names = "".join(f"{item.name};" for item in producer.media)
        lines.append(f"{producer.name};{names}")
    return _text(lines)


def favorites_report(platform: Platform) -> str:
    """Return one line per favourite of every subscriber.

    A subscriber without favourites gets a line holding only its code.
    """
    lines = []
    for subscriber in platform.subscribers:
        if not subscriber.favorites:
            lines.append(f"{subscriber.code};")
        lines.extend(
            f"{subscriber.code};{item.kind_name};{item.code};"
            f"{item.genre.name};{format_number(item.duration)}"
            for item in subscriber.favorites
        )
    return _text(lines)


def statistics_report(platform: Platform) -> str:
    """Return consumption totals, genre figures and the top media and producers."""
    favorites = [item for sub in platform.subscribers for item in sub.favorites]
    consumed = sum((item.duration for item in favorites), 0.0)
    lines = [f"Horas Consumidas: {format_number(consumed)} minutos", ""]

    tallies = []
    top_name, top_total = "", 0.0
    for genre in platform.genres:
        matching = [item for item in platform.media if item.genre.name == genre.name]
        total = sum((item.duration for item in matching), 0.0)
        tallies.append((genre.name, len(matching)))
        if total >= top_total:
            top_name, top_total = genre.name, total
    lines.append(f"Gênero mais ouvido: {top_name} - {format_number(top_total)}")
    lines.extend(["", "Mídias por Gênero:"])
    lines.extend(f"{name}:{count}" for name, count in tallies)

    picks = Counter(item.name for item in favorites)
    lines.extend(["", "Top 10 Mídias: "])
    media_ranking = sorted(
        ((picks[item.name], item.name, item.genre.name) for item in platform.media),
        reverse=True,
    )[:_TOP]
    lines.extend(f"{name}:{genre}:{count}" for count, name, genre in media_ranking)

    lines.extend(["", "Top 10 Produtores:"])
    producer_ranking = sorted(
        (
            (sum(picks[item.name] for item in producer.media), producer.name)
            for producer in platform.producers
        ),
        reverse=True,
    )[:_TOP]
    lines.extend(f"{name}:{count}" for count, name in producer_ranking)
    return _text(lines)


def generate_reports(platform: Platform, directory: Union[str, Path]) -> List[Path]:
    """Write the four report files into ``directory`` and return their paths."""
    target = Path(directory)
    written = []
    for filename, build in (
        (BACKUP_FILE, backup_report),
        (PRODUCERS_FILE, producers_report),
        (FAVORITES_FILE, favorites_report),
        (STATISTICS_FILE, statistics_report),
    ):
        path = target / filename
        path.write_text(build(platform), encoding="utf-8")
        written.append(path)
    return written