"""공통 유틸리티 모듈.

로깅, 설정, 에러 처리, 모델 출력 파싱 등 공통 기능을 제공합니다.
"""

from .config import get_config
from .errors import (
    AgentError,
    ConfigurationError,
    EmptyOutputError,
    InvalidArgumentError,
    NoJSONObjectFoundError,
    ParseError,
    RemoteCallError,
    SessionCreationError,
)
from .json_extractor import extract_json_object, strip_json_code_fences
from .logger import get_logger

__all__ = [
    "get_logger",
    "get_config",
    "extract_json_object",
    "strip_json_code_fences",
    "AgentError",
    "ConfigurationError",
    "InvalidArgumentError",
    "SessionCreationError",
    "RemoteCallError",
    "EmptyOutputError",
    "ParseError",
    "NoJSONObjectFoundError",
]
