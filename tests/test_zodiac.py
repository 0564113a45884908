"""Batı ve Çin burcu tablolarının testleri."""

import pytest

from date_analyzer.labels import UnsupportedLanguageError
from date_analyzer.services.astrology import sun_sign, western_zodiac
from date_analyzer.services.chinese import animal_for_year, chinese_zodiac


@pytest.mark.parametrize(
    "day, month, expected",
    [
        (1, 1, "Capricorn"),
        (19, 1, "Capricorn"),
        (20, 1, "Aquarius"),
        (18, 2, "Aquarius"),
        (19, 2, "Pisces"),
        (20, 3, "Pisces"),
        (21, 3, "Aries"),
        (19, 4, "Aries"),
        (20, 4, "Taurus"),
        (20, 5, "Taurus"),
        (21, 5, "Gemini"),
        (20, 6, "Gemini"),
        (21, 6, "Cancer"),
        (22, 7, "Cancer"),
        (23, 7, "Leo"),
        (22, 8, "Leo"),
        (23, 8, "Virgo"),
        (22, 9, "Virgo"),
        (23, 9, "Libra"),
        (22, 10, "Libra"),
        (23, 10, "Scorpio"),
        (21, 11, "Scorpio"),
        (22, 11, "Sagittarius"),
        (21, 12, "Sagittarius"),
        (22, 12, "Capricorn"),
        (31, 12, "Capricorn"),
    ],
)
def test_western_boundaries(day, month, expected):
    assert western_zodiac(day, month) == expected


@pytest.mark.parametrize("month", [0, 13, -5])
def test_western_unknown_month_is_sentinel(month):
    assert western_zodiac(10, month) == "Unknown"
    assert sun_sign(10, month) is None


def test_western_localized():
    assert western_zodiac(25, 12, "es") == "Capricornio"
    assert western_zodiac(15, 8, "tr") == "Aslan"
    assert western_zodiac(10, 13, "es") == "Desconocido"


@pytest.mark.parametrize(
    "year, expected",
    [
        (2000, "Dragon"),
        (2001, "Snake"),
        (2002, "Horse"),
        (2003, "Goat"),
        (2004, "Monkey"),
        (2005, "Rooster"),
    ],
)
def test_chinese_table(year, expected):
    assert chinese_zodiac(year) == expected


@pytest.mark.parametrize("year", [1999, 2006, 1900, 2100])
def test_chinese_out_of_range_is_sentinel(year):
    assert chinese_zodiac(year) == "Out of range"


def test_chinese_localized():
    assert chinese_zodiac(2000, "es") == "Dragón"
    assert chinese_zodiac(2005, "es") == "Gallo"
    assert chinese_zodiac(2004, "tr") == "Maymun"
    assert chinese_zodiac(1999, "es") == "Fuera de rango"


def test_animal_cycle_repeats_every_12_years():
    assert animal_for_year(1996) == "Rat"
    assert animal_for_year(2008) == "Rat"
    assert animal_for_year(2012) == animal_for_year(2000) == "Dragon"


def test_unsupported_language_raises():
    with pytest.raises(UnsupportedLanguageError):
        chinese_zodiac(2000, "fr")
    with pytest.raises(ValueError):
        western_zodiac(1, 1, "de")
