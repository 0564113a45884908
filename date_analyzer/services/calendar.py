MIN_YEAR = 2000
MAX_YEAR = 2005

# Ay → gün sayısı (şubat artık yılda 29)
DAYS_IN_MONTH = {
    1: 31, 2: 28, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}


def is_leap_year(year: int) -> bool:
    """Gregoryen kural: 4'e bölünen, 100'e bölünmeyen ya da 400'e bölünen yıllar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_days_in_month(month: int, leap_year: bool) -> int:
    """Ayın son günü. 1–12 dışındaki ay için ValueError."""
    if month not in DAYS_IN_MONTH:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if month == 2 and leap_year:
        return 29
    return DAYS_IN_MONTH[month]


def year_in_range(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR
