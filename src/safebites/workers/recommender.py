"""대체 제품 추천 Worker Agent

같은 카테고리에서 더 건강한 대체 제품을 찾습니다.
"""

from typing import Any

from ..runtime.runner import AgentRunner
from ..utils.logger import get_logger
from .base import BaseWorker
from .models import RecommenderResult
from .prompts import RECOMMENDER_INSTRUCTIONS

logger = get_logger(__name__)


class RecommenderWorker(BaseWorker):
    """대체 제품 추천 Worker Agent

    제품명과 현재 점수를 받아 대체 제품 3개를 요청합니다. 개수는 프롬프트
    약속일 뿐 검증하지 않습니다. 응답은 코드 펜스 제거 없이 바로 파싱합니다.

    Examples:
        >>> worker = RecommenderWorker(chat_client, tools=[HostedWebSearchTool()])
        >>> result = await worker.recommend("Sugary Cereal", 3.0)
        >>> print(result.recommendations[0].product_name)
        'Unsweetened Oats'
    """

    APP_NAME = "safebites-recommender"

    def __init__(
        self,
        chat_client: Any,
        tools: list[Any] | None = None,
        runner: AgentRunner | None = None,
    ):
        """Recommender Worker를 초기화합니다.

        Args:
            chat_client: Agent Framework ChatClient
            tools: 검색 Tool 목록
            runner: 모델 호출 게이트웨이
        """
        super().__init__(
            chat_client=chat_client,
            instructions=RECOMMENDER_INSTRUCTIONS,
            tools=tools,
            name="recommender_agent",
            description="Finds healthier alternatives for a product.",
            runner=runner,
        )

    async def recommend(self, product_name: str, current_score: float) -> RecommenderResult:
        """대체 제품을 추천합니다.

        Args:
            product_name: 원래 제품명
            current_score: 현재 overall_score

        Returns:
            RecommenderResult

        Raises:
            InvalidArgumentError: 제품명이 비어 있는 경우 (원격 호출 없음)
            ParseError: 응답이 RecommenderResult JSON이 아닌 경우
        """
        self._require_product_name(product_name)
        logger.info(
            f"대체 제품 추천 시작: product='{product_name}', score={current_score:.2f}"
        )

        payload = {"product_name": product_name, "overall_score": current_score}
        raw = await self._run(self.agent, self._to_json(payload))
        result = self._parse(RecommenderResult, raw, "추천")

        logger.info(f"대체 제품 추천 완료: recommendations={len(result.recommendations)}")
        return result
