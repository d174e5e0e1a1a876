import logging
import os
import threading
from logging.handlers import RotatingFileHandler

from config import Config

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_LOG_FILE = "app.log"

_handlers = None
_handlers_lock = threading.Lock()


def _build_handlers():
    """콘솔(LOG_LEVEL) + 파일(DEBUG, 10MB x 5 rotating) 핸들러."""
    formatter = logging.Formatter(_LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))
    console.setFormatter(formatter)

    os.makedirs(Config.LOG_DIR, exist_ok=True)
    rotating = RotatingFileHandler(
        os.path.join(Config.LOG_DIR, _LOG_FILE),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8',
    )
    rotating.setLevel(logging.DEBUG)
    rotating.setFormatter(formatter)
    return [console, rotating]


def get_logger(name: str):
    """
    모듈별 로거 반환.
    핸들러는 프로세스 전체에서 한 벌만 만들어 공유.
    """
    global _handlers
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    with _handlers_lock:
        if _handlers is None:
            _handlers = _build_handlers()

    logger.setLevel(logging.DEBUG)
    for handler in _handlers:
        logger.addHandler(handler)
    # root 로 전파하지 않음
    logger.propagate = False
    return logger
