"""로깅 설정 및 유틸리티.

구조화된 로그 포맷과 로거 인스턴스를 제공합니다.
"""

import logging
import sys
from typing import Any

# 로그 포맷 설정
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PREVIEW_LENGTH = 160


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """로거 인스턴스를 생성하여 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        level: 로그 레벨 (기본값: INFO)

    Returns:
        설정된 Logger 인스턴스

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("워크플로우 시작")
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 중복 설정 방지
    if logger.handlers:
        return logger

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # 상위 로거로 전파 방지 (중복 로그 방지)
    logger.propagate = False

    return logger


def log_with_context(
    logger: logging.Logger, level: int, message: str, **context: Any
) -> None:
    """컨텍스트 정보와 함께 로그를 기록합니다.

    Args:
        logger: Logger 인스턴스
        level: 로그 레벨
        message: 로그 메시지
        **context: 추가 컨텍스트 정보 (key-value)

    Example:
        >>> log_with_context(
        ...     logger,
        ...     logging.INFO,
        ...     "단계 완료",
        ...     step="search",
        ...     ingredients=12,
        ... )
    """
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    full_message = f"{message} | {context_str}" if context else message
    logger.log(level, full_message)


def preview_text(raw: str, max_length: int = PREVIEW_LENGTH) -> str:
    """로그용으로 텍스트를 잘라 미리보기를 만듭니다.

    Args:
        raw: 원본 텍스트
        max_length: 최대 길이 (0 이하이면 자르지 않음)

    Returns:
        공백이 제거되고 필요 시 "..."이 붙은 텍스트
    """
    text = raw.strip()
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + "..."
