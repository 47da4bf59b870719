"""공유 로깅 유틸리티

서비스 모듈은 logging.getLogger(__name__)만 사용하고,
핸들러 구성은 엔트리 포인트(gateway, scripts)에서 한 번 한다.
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PACKAGES = ("shared", "morpho_scoring", "program_generator", "gateway")


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    name = str(level or "INFO").upper()
    if name not in _LEVEL_NAMES:
        return logging.INFO
    return getattr(logging, name)


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름
        level: 로그 레벨 (기본값: INFO, "DEBUG" 같은 문자열도 허용)

    Returns:
        logging.Logger 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(_resolve_level(level))
    return logger


def configure_logging(level: Optional[str] = None) -> None:
    """패키지 루트 로거 구성 (gateway 시작 시 호출)"""
    for package in PACKAGES:
        get_logger(package, level)
