from typing import Optional

from ..labels import DEFAULT_LANGUAGE, message, sign_label


def sun_sign(day: int, month: int) -> Optional[str]:
    """
    Gün/ay bilgisinden Batı burcunu (İngilizce anahtar) çıkarır.
    Sınır günü her zaman önceki burca aittir. Ay 1–12 dışındaysa None.
    """
    m = month
    d = day

    # Oğlak: 22 Aralık – 19 Ocak
    if (m == 12 and d >= 22) or (m == 1 and d <= 19):
        return "Capricorn"
    # Kova: 20 Ocak – 18 Şubat
    if (m == 1 and d >= 20) or (m == 2 and d <= 18):
        return "Aquarius"
    # Balık: 19 Şubat – 20 Mart
    if (m == 2 and d >= 19) or (m == 3 and d <= 20):
        return "Pisces"
    # Koç: 21 Mart – 19 Nisan
    if (m == 3 and d >= 21) or (m == 4 and d <= 19):
        return "Aries"
    # Boğa: 20 Nisan – 20 Mayıs
    if (m == 4 and d >= 20) or (m == 5 and d <= 20):
        return "Taurus"
    # İkizler: 21 Mayıs – 20 Haziran
    if (m == 5 and d >= 21) or (m == 6 and d <= 20):
        return "Gemini"
    # Yengeç: 21 Haziran – 22 Temmuz
    if (m == 6 and d >= 21) or (m == 7 and d <= 22):
        return "Cancer"
    # Aslan: 23 Temmuz – 22 Ağustos
    if (m == 7 and d >= 23) or (m == 8 and d <= 22):
        return "Leo"
    # Başak: 23 Ağustos – 22 Eylül
    if (m == 8 and d >= 23) or (m == 9 and d <= 22):
        return "Virgo"
    # Terazi: 23 Eylül – 22 Ekim
    if (m == 9 and d >= 23) or (m == 10 and d <= 22):
        return "Libra"
    # Akrep: 23 Ekim – 21 Kasım
    if (m == 10 and d >= 23) or (m == 11 and d <= 21):
        return "Scorpio"
    # Yay: 22 Kasım – 21 Aralık
    if (m == 11 and d >= 22) or (m == 12 and d <= 21):
        return "Sagittarius"

    return None


def western_zodiac(day: int, month: int, lang: str = DEFAULT_LANGUAGE) -> str:
    """Batı burcu adı; geçersiz ayda hata yerine "Unknown" döner."""
    sign = sun_sign(day, month)
    if sign is None:
        return message("unknown", lang)
    return sign_label(sign, lang)
