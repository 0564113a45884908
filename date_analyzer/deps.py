from typing import Optional

import structlog
from fastapi import HTTPException

from .config import settings
from .labels import UnsupportedLanguageError, check_language

log = structlog.get_logger(__name__)


def get_language(lang: Optional[str] = None) -> str:
    """?lang= parametresi; verilmezse settings.DEFAULT_LANGUAGE kullanılır."""
    chosen = (lang or settings.DEFAULT_LANGUAGE).strip().lower()
    try:
        return check_language(chosen)
    except UnsupportedLanguageError as err:
        log.warning("unsupported_language", lang=chosen)
        raise HTTPException(status_code=400, detail=str(err)) from err
