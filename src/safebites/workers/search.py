"""원재료 검색 Worker Agent

제품명으로 웹을 검색하여 원재료 목록과 짧은 설명을 찾습니다.
"""

from typing import Any

from ..runtime.runner import AgentRunner
from ..utils.logger import get_logger
from .base import BaseWorker
from .models import WebSearchResult
from .prompts import SEARCH_INSTRUCTIONS

logger = get_logger(__name__)


class SearchWorker(BaseWorker):
    """원재료 검색 Worker Agent

    검색 Tool(기본값: hosted 웹 검색)을 사용해 제품의 공식 원재료 목록을
    조회합니다. 프롬프트가 순수 JSON만 요구하므로 코드 펜스를 제거하지 않고
    바로 파싱합니다.

    Examples:
        >>> from agent_framework import HostedWebSearchTool
        >>> worker = SearchWorker(chat_client, tools=[HostedWebSearchTool()])
        >>> result = await worker.search("Coca-Cola Zero")
        >>> print(result.ingredients[0].name)
        'Carbonated Water'
    """

    APP_NAME = "safebites-search"

    def __init__(
        self,
        chat_client: Any,
        tools: list[Any] | None = None,
        runner: AgentRunner | None = None,
    ):
        """원재료 검색 Worker를 초기화합니다.

        Args:
            chat_client: Agent Framework ChatClient
            tools: 검색 Tool 목록
            runner: 모델 호출 게이트웨이
        """
        super().__init__(
            chat_client=chat_client,
            instructions=SEARCH_INSTRUCTIONS,
            tools=tools,
            name="search_agent",
            description="Finds product ingredients using grounded web search.",
            runner=runner,
        )

    async def search(self, product_name: str) -> WebSearchResult:
        """제품의 원재료 목록을 검색합니다.

        Args:
            product_name: 제품명 (예: "Sugary Oatmeal")

        Returns:
            WebSearchResult (원재료 순서는 모델 출력 순서)

        Raises:
            InvalidArgumentError: 제품명이 비어 있는 경우 (원격 호출 없음)
            ParseError: 응답이 WebSearchResult JSON이 아닌 경우
        """
        self._require_product_name(product_name)
        logger.info(f"원재료 검색 시작: product='{product_name}'")

        raw = await self._run(self.agent, product_name.strip())
        result = self._parse(WebSearchResult, raw, "검색")

        logger.info(f"원재료 검색 완료: ingredients={len(result.ingredients)}")
        return result
