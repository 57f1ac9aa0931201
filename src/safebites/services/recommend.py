"""점수가 알려진 제품의 대체 제품 추천 서비스."""

from typing import Protocol

from ..utils.errors import ConfigurationError, InvalidArgumentError
from ..utils.logger import get_logger
from ..workers.models import RecommenderResult

logger = get_logger(__name__)


class RecommendationRunner(Protocol):
    async def recommend(self, product_name: str, score: float) -> RecommenderResult: ...


class RecommendService:
    """Recommender를 단독으로 호출하는 진입점.

    Orchestrator.recommend 또는 RecommenderWorker를 그대로 주입할 수 있습니다.
    """

    def __init__(self, recommender: RecommendationRunner | None):
        self.recommender = recommender

    async def recommend(self, product_name: str, score: float) -> RecommenderResult:
        """대체 제품을 추천합니다.

        Raises:
            ConfigurationError: recommender가 없는 경우
            InvalidArgumentError: 제품명이 비어 있거나 점수가 음수인 경우
        """
        if self.recommender is None:
            raise ConfigurationError("RecommendService에는 recommender가 필요합니다")
        if not product_name or not product_name.strip():
            raise InvalidArgumentError("제품명은 필수입니다")
        if score < 0:
            raise InvalidArgumentError("점수는 0 이상이어야 합니다")

        logger.info(f"추천 요청: product='{product_name.strip()}', score={score:.2f}")
        return await self.recommender.recommend(product_name.strip(), score)
