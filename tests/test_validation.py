import pytest

from tocadigital.media import Genre
from tocadigital.users import Producer
from tocadigital.subscribers import Subscriber
from tocadigital.media import Song
from tocadigital.validation import (
    FormatError,
    InconsistencyError,
    InputError,
    check_decimal,
    check_digits,
    check_genre_exists,
    check_media_exists,
    check_media_kind,
    check_producer_exists,
    check_subscriber_exists,
    check_user_kind,
)


@pytest.mark.parametrize("text", ["123", "", "0"])
def test_check_digits_accepts(text):
    assert check_digits(text) is None


@pytest.mark.parametrize("text", ["12a", "1.5", " 1", "-3"])
def test_check_digits_rejects(text):
    with pytest.raises(FormatError) as info:
        check_digits(text)
    assert str(info.value) == "Erro de formatação"


def test_check_decimal():
    assert check_decimal("3.25") is None
    with pytest.raises(FormatError):
        check_decimal("3,25")


def test_errors_share_base():
    with pytest.raises(InputError):
        check_media_kind("X")


def test_check_media_kind():
    assert check_media_kind("P") is None
    assert check_media_kind("M") is None
    with pytest.raises(InconsistencyError) as info:
        check_media_kind("A")
    assert str(info.value) == "Inconsistências na entrada"


@pytest.mark.parametrize("kind", ["P", "U", "A"])
def test_check_user_kind_accepts(kind):
    assert check_user_kind(kind) is None


def test_check_user_kind_rejects():
    with pytest.raises(InconsistencyError):
        check_user_kind("M")


def test_check_genre_exists():
    genres = [Genre("Rock", "RK"), Genre("Pop", "PP")]
    assert check_genre_exists("PP", genres) is None
    with pytest.raises(InconsistencyError):
        check_genre_exists("JZ", genres)
    with pytest.raises(InconsistencyError):
        check_genre_exists("RK", [])


def test_check_producer_exists():
    producers = [Producer("Band", 3)]
    assert check_producer_exists(3, producers) is None
    with pytest.raises(InconsistencyError):
        check_producer_exists(4, producers)


def test_check_subscriber_exists_prints_missing_code(capsys):
    subs = [Subscriber("Ana", 1)]
    assert check_subscriber_exists(1, subs) is None
    with pytest.raises(InconsistencyError):
        check_subscriber_exists(8, subs)
    assert capsys.readouterr().out == "8\n"


def test_check_media_exists():
    media = [Song("Tune", 5)]
    assert check_media_exists(5, media) is None
    with pytest.raises(InconsistencyError):
        check_media_exists(6, media)