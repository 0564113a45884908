from typing import Dict

SUPPORTED_LANGUAGES = ("en", "es", "tr")
DEFAULT_LANGUAGE = "en"

# Batı burçları (İngilizce isimler anahtar olarak kullanılır)
WESTERN_SIGNS = [
    "Aries", "Taurus", "Gemini", "Cancer",
    "Leo", "Virgo", "Libra", "Scorpio",
    "Sagittarius", "Capricorn", "Aquarius", "Pisces",
]

# Çin zodyak döngüsü: Sıçan'dan Domuz'a
CHINESE_ANIMALS = [
    "Rat", "Ox", "Tiger", "Rabbit",
    "Dragon", "Snake", "Horse", "Goat",
    "Monkey", "Rooster", "Dog", "Pig",
]

SIGN_LABELS: Dict[str, Dict[str, str]] = {
    "es": {
        "Aries": "Aries",
        "Taurus": "Tauro",
        "Gemini": "Géminis",
        "Cancer": "Cáncer",
        "Leo": "Leo",
        "Virgo": "Virgo",
        "Libra": "Libra",
        "Scorpio": "Escorpio",
        "Sagittarius": "Sagitario",
        "Capricorn": "Capricornio",
        "Aquarius": "Acuario",
        "Pisces": "Piscis",
        "Rat": "Rata",
        "Ox": "Buey",
        "Tiger": "Tigre",
        "Rabbit": "Conejo",
        "Dragon": "Dragón",
        "Snake": "Serpiente",
        "Horse": "Caballo",
        "Goat": "Cabra",
        "Monkey": "Mono",
        "Rooster": "Gallo",
        "Dog": "Perro",
        "Pig": "Cerdo",
    },
    "tr": {
        "Aries": "Koç",
        "Taurus": "Boğa",
        "Gemini": "İkizler",
        "Cancer": "Yengeç",
        "Leo": "Aslan",
        "Virgo": "Başak",
        "Libra": "Terazi",
        "Scorpio": "Akrep",
        "Sagittarius": "Yay",
        "Capricorn": "Oğlak",
        "Aquarius": "Kova",
        "Pisces": "Balık",
        "Rat": "Sıçan",
        "Ox": "Öküz",
        "Tiger": "Kaplan",
        "Rabbit": "Tavşan",
        "Dragon": "Ejderha",
        "Snake": "Yılan",
        "Horse": "At",
        "Goat": "Keçi",
        "Monkey": "Maymun",
        "Rooster": "Horoz",
        "Dog": "Köpek",
        "Pig": "Domuz",
    },
}

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "unknown": "Unknown",
        "out_of_range": "Out of range",
        "invalid_year": "The year must be between {min_year} and {max_year}",
        "invalid_month": "The month must be between 1 and 12",
        "invalid_day": "The day must be between 1 and {max_days} for month {month}",
        "summary_valid": (
            "Date {day:02d}/{month:02d}/{year}: valid | Leap year: {leap} | "
            "Western zodiac: {western} | Chinese zodiac: {chinese}"
        ),
        "summary_invalid": "Date {day:02d}/{month:02d}/{year}: INVALID - {error}",
        "yes": "yes",
        "no": "no",
    },
    "es": {
        "unknown": "Desconocido",
        "out_of_range": "Fuera de rango",
        "invalid_year": "El año debe estar entre {min_year} y {max_year}",
        "invalid_month": "El mes debe estar entre 1 y 12",
        "invalid_day": "El día debe estar entre 1 y {max_days} para el mes {month}",
        "summary_valid": (
            "Fecha {day:02d}/{month:02d}/{year}: Válida | Año bisiesto: {leap} | "
            "Zodiaco occidental: {western} | Zodiaco chino: {chinese}"
        ),
        "summary_invalid": "Fecha {day:02d}/{month:02d}/{year}: INVÁLIDA - {error}",
        "yes": "Sí",
        "no": "No",
    },
    "tr": {
        "unknown": "Bilinmiyor",
        "out_of_range": "Aralık dışı",
        "invalid_year": "Yıl {min_year} ile {max_year} arasında olmalıdır",
        "invalid_month": "Ay 1 ile 12 arasında olmalıdır",
        "invalid_day": "Gün 1 ile {max_days} arasında olmalıdır ({month}. ay)",
        "summary_valid": (
            "Tarih {day:02d}/{month:02d}/{year}: geçerli | Artık yıl: {leap} | "
            "Batı burcu: {western} | Çin burcu: {chinese}"
        ),
        "summary_invalid": "Tarih {day:02d}/{month:02d}/{year}: GEÇERSİZ - {error}",
        "yes": "evet",
        "no": "hayır",
    },
}


class UnsupportedLanguageError(ValueError):
    """Desteklenmeyen dil kodu."""

    def __init__(self, lang: str):
        super().__init__(
            f"Unsupported language '{lang}', expected one of {', '.join(SUPPORTED_LANGUAGES)}"
        )
        self.lang = lang


def check_language(lang: str) -> str:
    if lang not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(lang)
    return lang


def sign_label(key: str, lang: str = DEFAULT_LANGUAGE) -> str:
    """İngilizce burç/hayvan anahtarını istenen dile çevirir."""
    check_language(lang)
    return SIGN_LABELS.get(lang, {}).get(key, key)


def message(key: str, lang: str = DEFAULT_LANGUAGE, **params) -> str:
    """
    MESSAGES içinden şablonu alır ve parametreleri yerleştirir.
    Örn: message("invalid_year", "es", min_year=2000, max_year=2005)
    """
    check_language(lang)
    template = MESSAGES[lang][key]
    return template.format(**params) if params else template
