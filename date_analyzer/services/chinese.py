from ..labels import CHINESE_ANIMALS, DEFAULT_LANGUAGE, message, sign_label
from .calendar import year_in_range

# 1996 Sıçan yılı: (yıl - 4) % 12 Sıçan için 0 verir
CYCLE_OFFSET = 4


def animal_for_year(year: int) -> str:
    """Yıla göre Çin zodyak hayvanı (İngilizce anahtar, aralık kontrolü yok)."""
    return CHINESE_ANIMALS[(year - CYCLE_OFFSET) % 12]


def chinese_zodiac(year: int, lang: str = DEFAULT_LANGUAGE) -> str:
    """
    Desteklenen yıllar (2000–2005) için Çin zodyak hayvanı.
    - Aralık dışındaki yıllarda hata fırlatmaz, "Out of range" döner.
    - Ay takvimi yılbaşı hesaba katılmaz: ocak/şubat tarihleri de miladi yılın hayvanını alır.
    """
    if not year_in_range(year):
        return message("out_of_range", lang)
    return sign_label(animal_for_year(year), lang)
