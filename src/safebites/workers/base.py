"""Worker Agent 베이스 클래스

모든 Worker Agent의 공통 초기화, 모델 호출, 출력 파싱 로직을 제공합니다.
"""

import json
from datetime import datetime
from typing import Any, TypeVar

from agent_framework import ChatAgent
from pydantic import BaseModel, ValidationError

from ..runtime.runner import AgentRunner
from ..utils.errors import InvalidArgumentError, ParseError
from ..utils.logger import get_logger, preview_text

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseWorker:
    """Worker Agent 베이스 클래스

    Search, Scorer, Recommender Worker가 상속하는 베이스 클래스입니다.
    Microsoft Agent Framework의 ChatAgent를 생성하고, 실제 호출은
    공유 AgentRunner에 위임합니다.

    Attributes:
        agent: Microsoft Agent Framework의 ChatAgent 인스턴스
        instructions: Worker별 시스템 프롬프트
        tools: 사용 가능한 Tool 목록 (웹 검색 등)
        runner: 모델 호출 게이트웨이

    Examples:
        >>> class SearchWorker(BaseWorker):
        ...     APP_NAME = "safebites-search"
        ...     async def search(self, product_name: str) -> WebSearchResult:
        ...         raw = await self._run(self.agent, product_name)
        ...         return self._parse(WebSearchResult, raw, "검색")
    """

    APP_NAME = "safebites"

    def __init__(
        self,
        chat_client: Any,
        instructions: str,
        tools: list[Any] | None = None,
        name: str | None = None,
        description: str | None = None,
        runner: AgentRunner | None = None,
    ):
        """Worker Agent를 초기화합니다.

        Args:
            chat_client: Agent Framework ChatClient (AzureOpenAIResponsesClient 등)
            instructions: Worker별 시스템 프롬프트
            tools: 사용 가능한 Tool 목록
            name: Agent 이름
            description: Agent 설명
            runner: 모델 호출 게이트웨이 (기본값: 새 AgentRunner)
        """
        self.chat_client = chat_client
        self.instructions = instructions
        self.tools = list(tools or [])
        self.runner = runner or AgentRunner()

        self.agent = self._create_agent(
            instructions=instructions,
            name=name,
            description=description,
            tools=self.tools,
        )

        logger.info(f"{self.__class__.__name__} 초기화 완료 (tools={len(self.tools)})")

    def _create_agent(
        self,
        instructions: str,
        name: str | None = None,
        description: str | None = None,
        tools: list[Any] | None = None,
    ) -> ChatAgent:
        """Worker의 chat_client로 ChatAgent를 생성합니다."""
        return ChatAgent(
            chat_client=self.chat_client,
            instructions=instructions,
            name=name,
            description=description,
            tools=tools or None,
        )

    async def _run(self, agent: Any, input_text: str) -> str:
        """게이트웨이를 통해 Agent를 한 번 실행합니다."""
        return await self.runner.run(self.APP_NAME, agent, input_text)

    def _parse(self, model_cls: type[ModelT], raw: str, label: str) -> ModelT:
        """모델 출력 텍스트를 JSON으로 디코딩하여 검증합니다.

        Args:
            model_cls: 기대하는 결과 모델
            raw: 모델 출력 텍스트
            label: 오류 메시지에 쓸 결과 이름

        Raises:
            ParseError: JSON이 아니거나 스키마와 맞지 않는 경우
        """
        try:
            return model_cls.model_validate_json(raw)
        except ValidationError as e:
            logger.error(
                f"{label} 결과 파싱 실패: error_count={e.error_count()}, "
                f"output_preview={preview_text(raw)!r}"
            )
            raise ParseError(f"{label} 결과 파싱 실패: {e}") from e

    @staticmethod
    def _require_product_name(product_name: str) -> str:
        """제품명이 비어 있지 않은지 확인합니다.

        Raises:
            InvalidArgumentError: 공백만 있는 경우
        """
        if not product_name or not product_name.strip():
            raise InvalidArgumentError("제품명은 필수입니다")
        return product_name

    @staticmethod
    def _to_json(payload: dict[str, Any]) -> str:
        """요청 payload를 JSON 문자열로 직렬화합니다."""
        return json.dumps(payload, ensure_ascii=False)

    def get_status(self) -> dict[str, Any]:
        """Worker의 현재 상태를 반환합니다.

        디버깅 및 모니터링을 위한 상태 정보입니다.
        """
        return {
            "worker_type": self.__class__.__name__,
            "app_name": self.APP_NAME,
            "tools_count": len(self.tools),
            "instructions_length": len(self.instructions),
            "timestamp": datetime.now().isoformat(),
        }
