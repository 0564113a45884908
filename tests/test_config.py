"""Settings, log yapılandırması ve çalıştırma komutu testleri."""

import pytest
import structlog
from pydantic import ValidationError
from structlog.testing import capture_logs

from date_analyzer import main
from date_analyzer.config import Settings
from date_analyzer.logging_config import setup_logging
from date_analyzer.services.analyzer import analyze


@pytest.fixture
def restore_structlog():
    yield
    structlog.reset_defaults()


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_LANGUAGE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.DEFAULT_LANGUAGE == "en"
    assert s.LOG_LEVEL == "INFO"
    assert s.CORS_ORIGINS == ["*"]
    assert s.APP_PORT == 8000


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_LANGUAGE", "es")
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.DEFAULT_LANGUAGE == "es"
    assert s.LOG_JSON is True
    assert s.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_default_language_applies_to_requests(monkeypatch):
    from fastapi.testclient import TestClient

    from date_analyzer import deps

    monkeypatch.setattr(deps.settings, "DEFAULT_LANGUAGE", "tr")
    r = TestClient(main.app).get("/api/v1/zodiac/chinese/2000")
    assert r.json()["sign"] == "Ejderha"


def test_setup_logging_accepts_levels(restore_structlog):
    setup_logging("debug", json=True)
    setup_logging("WARNING")


def test_info_level_hides_debug_events(restore_structlog):
    setup_logging("INFO")
    structlog.configure(cache_logger_on_first_use=False)

    with capture_logs() as logs:
        analyze(1, 1, 2000)
        analyze(1, 1, 1999)

    assert [entry["event"] for entry in logs] == ["date_rejected"]


def test_run_starts_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    main.run()

    assert calls == [
        (
            ("date_analyzer.main:app",),
            {
                "host": main.settings.APP_HOST,
                "port": main.settings.APP_PORT,
                "log_level": main.settings.LOG_LEVEL.lower(),
            },
        )
    ]
