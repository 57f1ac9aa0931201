"""안전성 점수 Worker Agent

원재료 목록 또는 추천 대체 제품을 사용자 선호에 맞춰 평가합니다.
"""

from typing import Any, Sequence

from pydantic import BaseModel

from ..runtime.runner import AgentRunner
from ..utils.json_extractor import strip_json_code_fences
from ..utils.logger import get_logger
from .base import BaseWorker
from .models import Ingredient, Recommendation, ScorerResult, UserPreferences
from .prompts import RECOMMENDATION_EVAL_INSTRUCTIONS, SCORER_INSTRUCTIONS

logger = get_logger(__name__)


class ScorerWorker(BaseWorker):
    """안전성 점수 Worker Agent

    두 개의 Agent를 가집니다.
    - agent: 원재료 점수 (알레르기/회피 성분/식단 목표 정책 포함)
    - recommendation_agent: 추천 대체 제품 평가

    점수 정책은 프롬프트로만 전달되며 결과를 다시 검증하지 않습니다.

    Examples:
        >>> worker = ScorerWorker(chat_client)
        >>> result = await worker.score_ingredients(
        ...     [Ingredient(name="Sugar", description="Sweetener")],
        ...     UserPreferences(diet_goals=["low-sugar"]),
        ... )
        >>> print(result.overall_score)
        3.5
    """

    APP_NAME = "safebites-scorer"

    def __init__(self, chat_client: Any, runner: AgentRunner | None = None):
        """Scorer Worker를 초기화합니다.

        Args:
            chat_client: Agent Framework ChatClient
            runner: 모델 호출 게이트웨이
        """
        super().__init__(
            chat_client=chat_client,
            instructions=SCORER_INSTRUCTIONS,
            name="ingredient_scorer_agent",
            description="Scores product ingredient safety with user preferences.",
            runner=runner,
        )
        self.recommendation_agent = self._create_agent(
            instructions=RECOMMENDATION_EVAL_INSTRUCTIONS,
            name="recommendation_scorer_agent",
            description="Scores recommended alternatives with user preferences.",
        )

    async def score_ingredients(
        self,
        ingredients: Sequence[Ingredient],
        preferences: UserPreferences | None = None,
    ) -> ScorerResult:
        """원재료 목록의 안전성을 평가합니다.

        Args:
            ingredients: Search Worker가 찾은 원재료 목록
            preferences: 사용자 식이 선호 (없으면 payload에서 생략)

        Returns:
            ScorerResult

        Raises:
            ParseError: 응답이 ScorerResult JSON이 아닌 경우
        """
        return await self._score(self.agent, "ingredients", ingredients, preferences)

    async def score_recommendations(
        self,
        recommendations: Sequence[Recommendation],
        preferences: UserPreferences | None = None,
    ) -> ScorerResult:
        """추천 대체 제품들을 평가합니다.

        Args:
            recommendations: Recommender Worker의 추천 목록
            preferences: 사용자 식이 선호 (없으면 payload에서 생략)

        Returns:
            ScorerResult

        Raises:
            ParseError: 응답이 ScorerResult JSON이 아닌 경우
        """
        return await self._score(
            self.recommendation_agent, "recommendations", recommendations, preferences
        )

    async def _score(
        self,
        agent: Any,
        key: str,
        items: Sequence[BaseModel],
        preferences: UserPreferences | None,
    ) -> ScorerResult:
        """{key: items, user_preferences?} payload를 전송하고 ScorerResult로 파싱합니다."""
        payload: dict[str, Any] = {key: [item.model_dump() for item in items]}
        # 선호 정보가 없으면 null이 아니라 키 자체를 생략
        if preferences is not None:
            payload["user_preferences"] = preferences.model_dump(by_alias=True)

        logger.info(
            f"점수 평가 시작: {key}={len(items)}, has_prefs={preferences is not None}"
        )

        raw = await self._run(agent, self._to_json(payload))
        result = self._parse(ScorerResult, strip_json_code_fences(raw), "점수")

        logger.info(f"점수 평가 완료: overall_score={result.overall_score:.2f}")
        return result
