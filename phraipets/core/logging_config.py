# phraipets/core/logging_config.py
import logging
import sys
import structlog
import os


def setup_logging(log_level_str: str = "INFO"):
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    is_dev = os.getenv("ENV_TYPE", "dev") == "dev"

    # Common processors for all environments
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Logs from other libraries (uvicorn, pymongo) go through the same renderer
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    renderer = structlog.dev.ConsoleRenderer() if is_dev else structlog.processors.JSONRenderer()
    structlog_handler = logging.StreamHandler(sys.stdout)
    structlog_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    ))

    root_logger.addHandler(structlog_handler)
    root_logger.setLevel(log_level)

    logging.getLogger("pymongo").setLevel(logging.WARNING)

    log = structlog.get_logger("logging_config")
    log.info("Logging configured", log_level=log_level_str,
             renderer="ConsoleRenderer" if is_dev else "JSONRenderer")
