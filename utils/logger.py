import logging
import sys
from pathlib import Path
from config.settings import settings


def _build_handlers() -> list:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
    handlers = [console_handler]

    # An empty LOG_FILE keeps logging on the console only
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        handlers.append(file_handler)

    return handlers


def setup_logger(name: str = None) -> logging.Logger:
    logger = logging.getLogger(name or __name__)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handlers = _build_handlers()

    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)

    # core.* modules log through plain module loggers; attach them once
    core_logger = logging.getLogger("core")
    if not core_logger.handlers:
        core_logger.setLevel(level)
        for handler in handlers:
            core_logger.addHandler(handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    return setup_logger(name)
