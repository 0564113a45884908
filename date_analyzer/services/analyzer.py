import structlog

from ..labels import DEFAULT_LANGUAGE, check_language, message
from ..models import AnalysisResult, DateErrorKind
from .astrology import western_zodiac
from .calendar import MAX_YEAR, MIN_YEAR, is_leap_year, max_days_in_month, year_in_range
from .chinese import chinese_zodiac

log = structlog.get_logger(__name__)


def _rejected(
    day: int, month: int, year: int, kind: DateErrorKind, text: str, lang: str
) -> AnalysisResult:
    log.info("date_rejected", day=day, month=month, year=year, error_kind=kind.value)
    return AnalysisResult.error(day, month, year, kind, text, language=lang)


def analyze(day: int, month: int, year: int, lang: str = DEFAULT_LANGUAGE) -> AnalysisResult:
    """
    Tarihi doğrular ve analiz eder.
    Kontrol sırası (ilk hata kazanır, kalan kontroller yapılmaz):
    1. Yıl 2000–2005 aralığında mı
    2. Ay 1–12 aralığında mı
    3. Artık yıl hesaplanır
    4. Gün 1 ile ayın son günü arasında mı
    Geçersiz tarih exception değil, valid_date=False olan bir sonuçtur.

    Loglar: geçerli tarihte debug "date_analyzed", geçersizde info "date_rejected".
    Kütüphane olarak kullanılırken setup_logging çağrılmazsa structlog varsayılanı
    debug satırlarını da stdout'a basar; setup_logging("INFO") ile susturulur.
    """
    check_language(lang)

    if not year_in_range(year):
        return _rejected(
            day, month, year,
            DateErrorKind.INVALID_YEAR,
            message("invalid_year", lang, min_year=MIN_YEAR, max_year=MAX_YEAR),
            lang,
        )

    if month < 1 or month > 12:
        return _rejected(
            day, month, year,
            DateErrorKind.INVALID_MONTH,
            message("invalid_month", lang),
            lang,
        )

    leap = is_leap_year(year)

    max_days = max_days_in_month(month, leap)
    if day < 1 or day > max_days:
        return _rejected(
            day, month, year,
            DateErrorKind.INVALID_DAY,
            message("invalid_day", lang, max_days=max_days, month=month),
            lang,
        )

    result = AnalysisResult.success(
        day,
        month,
        year,
        leap,
        western_zodiac(day, month, lang),
        chinese_zodiac(year, lang),
        language=lang,
    )
    log.debug(
        "date_analyzed",
        day=day,
        month=month,
        year=year,
        leap_year=leap,
        western=result.western_zodiac,
        chinese=result.chinese_zodiac,
    )
    return result
