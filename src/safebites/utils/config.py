"""애플리케이션 설정 관리.

환경 변수를 로드하고 Azure OpenAI 클라이언트를 초기화합니다.
"""

from typing import Any

from azure.identity import DefaultAzureCredential
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

# .env 파일 로드
load_dotenv()

DEFAULT_MIN_ACCEPTABLE_SCORE = 7.0
DEFAULT_MAX_RECOMMENDATION_TURNS = 2


class AzureOpenAISettings(BaseSettings):
    """Azure OpenAI 설정."""

    model_config = SettingsConfigDict(env_prefix="AZURE_OPENAI_")

    endpoint: str = Field(default="", description="Azure OpenAI 엔드포인트")
    api_key: str | None = Field(default=None, description="Azure OpenAI API 키")
    deployment_name: str = Field(default="gpt-4o", description="배포된 모델 이름")
    api_version: str | None = Field(default=None, description="API 버전")


class WorkflowSettings(BaseSettings):
    """개선 루프 설정."""

    model_config = SettingsConfigDict(env_prefix="WORKFLOW_")

    min_acceptable_score: float = Field(
        default=DEFAULT_MIN_ACCEPTABLE_SCORE, description="수용 임계 점수 (0~10)"
    )
    max_recommendation_turns: int = Field(
        default=DEFAULT_MAX_RECOMMENDATION_TURNS, description="최대 추천 반복 횟수"
    )


class AppConfig(BaseSettings):
    """애플리케이션 전체 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 알 수 없는 환경변수 무시
    )

    azure_openai: AzureOpenAISettings = Field(
        default_factory=lambda: AzureOpenAISettings()
    )
    workflow: WorkflowSettings = Field(default_factory=lambda: WorkflowSettings())

    debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")


# 전역 설정 인스턴스
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """애플리케이션 설정을 반환합니다.

    싱글톤 패턴으로 설정 인스턴스를 관리합니다.

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigurationError: 설정 로드에 실패한 경우

    Example:
        >>> config = get_config()
        >>> print(config.workflow.min_acceptable_score)
    """
    global _config

    if _config is None:
        try:
            _config = AppConfig()
            logger.info("애플리케이션 설정 로드 완료")
        except Exception as e:
            raise ConfigurationError(f"설정 로드 실패: {e}") from e

    return _config


def reset_config() -> None:
    """캐시된 설정을 제거합니다. (테스트용)"""
    global _config
    _config = None


def get_azure_credential() -> DefaultAzureCredential:
    """Azure 인증 자격 증명을 반환합니다.

    환경에 따라 적절한 인증 방식을 자동으로 선택합니다:
    - 로컬: Azure CLI 인증
    - Azure: Managed Identity
    """
    return DefaultAzureCredential()


def get_chat_client() -> Any:
    """Agent Framework용 Azure OpenAI Responses 클라이언트를 반환합니다.

    웹 검색 같은 hosted tool을 사용하려면 Responses API 클라이언트가 필요합니다.

    Returns:
        AzureOpenAIResponsesClient 인스턴스

    Raises:
        ConfigurationError: 엔드포인트 누락 또는 클라이언트 초기화 실패
    """
    from agent_framework.azure import AzureOpenAIResponsesClient

    settings = get_config().azure_openai

    if not settings.endpoint:
        raise ConfigurationError(
            "Azure OpenAI 설정이 필요합니다. 환경변수 AZURE_OPENAI_ENDPOINT를 설정하세요."
        )

    options: dict[str, Any] = {
        "endpoint": settings.endpoint,
        "deployment_name": settings.deployment_name,
    }
    if settings.api_version:
        options["api_version"] = settings.api_version

    try:
        if settings.api_key:
            client = AzureOpenAIResponsesClient(api_key=settings.api_key, **options)
            logger.info("Azure OpenAI 클라이언트 초기화 완료 (API 키)")
        else:
            client = AzureOpenAIResponsesClient(
                credential=get_azure_credential(), **options
            )
            logger.info("Azure OpenAI 클라이언트 초기화 완료 (DefaultAzureCredential)")

        return client

    except Exception as e:
        raise ConfigurationError(f"Azure OpenAI 클라이언트 초기화 실패: {e}") from e
