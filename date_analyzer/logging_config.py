import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json: bool = False) -> None:
    """
    structlog yapılandırması (uygulama açılışında bir kez çağrılır).
    - level: DEBUG / INFO / WARNING / ERROR
    - json: True ise satırlar JSON olarak basılır, değilse okunabilir konsol çıktısı
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
