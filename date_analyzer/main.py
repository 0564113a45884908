import structlog
import uvicorn
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .deps import get_language
from .logging_config import setup_logging
from .schemas import (
    AnalyzeRequest,
    AnalysisResponse,
    ChineseSignResponse,
    LeapYearResponse,
    WesternSignResponse,
)
from .services.analyzer import analyze
from .services.astrology import western_zodiac
from .services.calendar import is_leap_year
from .services.chinese import chinese_zodiac

log = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Tarih doğrulama, artık yıl, Batı ve Çin burcu servisi (2000–2005)",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    """Uygulama ayağa kalkarken log yapılandırmasını kur."""
    setup_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)
    log.info("startup", app=settings.APP_NAME, default_language=settings.DEFAULT_LANGUAGE)


@app.get("/")
def root():
    return {"status": "ok", "app": settings.APP_NAME}


# ----------------------------------------------------
# TARİH ANALİZİ
# ----------------------------------------------------


def _respond(day: int, month: int, year: int, lang: str) -> AnalysisResponse:
    # Geçersiz tarih de 200 döner; hata mesajı zarfın içinde
    result = analyze(day, month, year, lang)
    if not result.valid_date:
        return AnalysisResponse(success=False, data=result, error=result.error_message)
    return AnalysisResponse(success=True, data=result)


@app.get("/api/v1/analyze", response_model=AnalysisResponse)
def analyze_query(
    day: int,
    month: int,
    year: int,
    lang: str = Depends(get_language),
):
    """
    Tarih analizi (query parametreleri ile):
    - Geçerlilik (2000–2005 arası)
    - Artık yıl
    - Batı ve Çin burcu
    """
    return _respond(day, month, year, lang)


@app.post("/api/v1/analyze", response_model=AnalysisResponse)
def analyze_body(
    payload: AnalyzeRequest,
    lang: str = Depends(get_language),
):
    return _respond(payload.day, payload.month, payload.year, lang)


# ----------------------------------------------------
# YARDIMCI HESAPLAR
# ----------------------------------------------------


@app.get("/api/v1/leap-year/{year}", response_model=LeapYearResponse)
def leap_year(year: int):
    """Herhangi bir yıl için artık yıl kontrolü (2000–2005 sınırı yok)."""
    return LeapYearResponse(year=year, leap_year=is_leap_year(year))


@app.get("/api/v1/zodiac/western", response_model=WesternSignResponse)
def western_sign(day: int, month: int, lang: str = Depends(get_language)):
    """Geçersiz ayda "Unknown" döner, hata değil."""
    return WesternSignResponse(day=day, month=month, sign=western_zodiac(day, month, lang))


@app.get("/api/v1/zodiac/chinese/{year}", response_model=ChineseSignResponse)
def chinese_sign(year: int, lang: str = Depends(get_language)):
    """2000–2005 dışındaki yıllarda "Out of range" döner, hata değil."""
    return ChineseSignResponse(year=year, sign=chinese_zodiac(year, lang))


def run():
    """`date-analyzer` komutu: uygulamayı uvicorn ile ayağa kaldırır."""
    uvicorn.run(
        "date_analyzer.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
