# tocadigital

A catalogue of songs and podcasts for a digital music platform. It reads four
semicolon-separated files (genres, users, media and favourites), checks them
for formatting errors and inconsistencies, and writes four reports.

## Installation

```
pip install .
```

## Usage

```
tocadigital -g genres.csv -u users.csv -m media.csv -f favorites.csv
```

Exactly four option and path pairs are expected, in any order. The files are
always loaded in the order genres, users, media, favourites. Each file starts
with a header line, which is skipped.

- **genres**: `code;name`
- **users**: `code;kind;name`, where the kind is `U` (subscriber),
  `A` (artist) or `P` (podcaster)
- **media**: `code;name;kind;producers;duration;genres;seasons;album;album code;year`,
  where the kind is `M` (song) or `P` (podcast), producers is a comma-separated
  list of user codes, the duration may use a comma as decimal separator, and
  only the first genre code of the genres list is used. Songs that share an
  album code are grouped into one album named by that code. Media codes are
  expected to number the lines 1, 2, 3, … in file order, since a media code is
  also used as its position in the catalogue.
- **favorites**: `subscriber code;media codes`, the media codes separated by
  commas. A media item repeated for one subscriber is kept once.

The reports are written to the current directory:

- `backup.txt`: every subscriber and producer, then every media item with its
  producers, duration, genre, season count (podcasts), album and year
- `produtores.csv`: producers ordered by name ignoring ASCII case, each with
  their media ordered by name
- `favorito.csv`: one line per favourite of each subscriber, podcasts first and
  each group ordered by code; a subscriber without favourites gets a line with
  only its code
- `estatisticas.txt`: total minutes of all favourites, the genre with the
  largest total duration, the number of media per genre, and the top 10 media
  and producers by how many times they were chosen as favourites

If the arguments are wrong or a file cannot be opened, the command prints
`Erro de I/O` to standard error and exits with status 1; an unrecognised option
letter is also reported on standard output. A malformed number prints
`Erro de formatação`, and a reference to an unknown genre, user kind, producer,
subscriber or media item prints `Inconsistências na entrada`; both exit with
status 1. An unknown subscriber code is printed on standard output before the
error.

## Library use

```python
from tocadigital.platform import Platform
from tocadigital.reports import generate_reports

platform = Platform("Spotify++")
with open("genres.csv", encoding="utf-8") as stream:
    platform.load_genres(stream)
with open("users.csv", encoding="utf-8") as stream:
    platform.load_users(stream)
with open("media.csv", encoding="utf-8") as stream:
    platform.load_media(stream)
with open("favorites.csv", encoding="utf-8") as stream:
    platform.load_favorites(stream)

paths = generate_reports(platform, "output")  # the directory must already exist
```

Modules:

- `tocadigital.media`: `Genre`, `MediaKind`, `Media`, `Song` and `Podcast`,
  with `describe()` and `write_to(stream)`, and `format_number`
- `tocadigital.users`: `User`, `Producer`, `Artist` and `Podcaster`
- `tocadigital.albums`: `Album`
- `tocadigital.subscribers`: `Subscriber`, with its favourites list,
  `count_podcasts()` and `sort_favorites()`
- `tocadigital.validation`: the field checks and the errors `InputError`,
  `FormatError` and `InconsistencyError`
- `tocadigital.platform`: `Platform` with its loaders, `genres_named`,
  `describe_genre` and `sort_producers`, and `read_genres(path)`
- `tocadigital.reports`: `backup_report`, `producers_report`,
  `favorites_report` and `statistics_report`, each returning text, and
  `generate_reports`. `producers_report` leaves the producers and their media
  sorted on the platform.
- `tocadigital.cli`: `parse_arguments` and `main`

## What it does not do

The package only reads catalogue files and writes text reports. It does not
play, stream or store audio, and it keeps no data between runs.

## Tests

```
pip install .[test]
pytest
```