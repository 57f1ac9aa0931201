"""Orchestrator - 제품 안전성 분석 및 개선 워크플로우."""

import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator

from agent_framework import HostedWebSearchTool

from ..runtime.runner import AgentRunner
from ..utils.config import get_config
from ..utils.errors import AgentError, ConfigurationError
from ..utils.logger import get_logger, log_with_context
from ..workers.models import (
    RecommenderResult,
    ScorerResult,
    UserPreferences,
    WebSearchResult,
)
from ..workers.recommender import RecommenderWorker
from ..workers.scorer import ScorerWorker
from ..workers.search import SearchWorker
from .models import LoopTurn, WorkflowConfig, WorkflowResult

logger = get_logger(__name__)


class Orchestrator:
    """워크플로우 진입점.

    Search, Scorer, Recommender Worker를 순서대로 호출합니다.

    상태 흐름:
        Searching → InitialScoring → {Accepted | Improving}
        Improving: Recommending → Rescoring → {Accepted | Improving | Exhausted}

    각 단계는 직전 단계의 출력에 의존하므로 항상 순차 실행됩니다.
    어느 단계든 실패하면 호출 전체가 실패하며 부분 결과는 반환하지 않습니다.
    """

    def __init__(
        self,
        searcher: SearchWorker | None = None,
        scorer: ScorerWorker | None = None,
        recommender: RecommenderWorker | None = None,
        config: WorkflowConfig | None = None,
    ):
        """Orchestrator를 초기화합니다.

        Args:
            searcher: SearchWorker 인스턴스
            scorer: ScorerWorker 인스턴스
            recommender: RecommenderWorker 인스턴스
            config: 워크플로우 설정 (기본값: 임계 7.0, 최대 2턴)
        """
        self.searcher = searcher
        self.scorer = scorer
        self.recommender = recommender
        self.config = config or WorkflowConfig()

        logger.info(
            f"Orchestrator 초기화 완료 "
            f"(min_score={self.config.min_acceptable_score}, "
            f"max_turns={self.config.max_recommendation_turns})"
        )

    async def analyze_only(
        self,
        product_name: str,
        preferences: UserPreferences | None = None,
    ) -> tuple[WebSearchResult, ScorerResult]:
        """원재료 검색과 초기 평가만 실행합니다 (개선 루프 없음).

        Args:
            product_name: 제품명
            preferences: 사용자 식이 선호

        Returns:
            (WebSearchResult, ScorerResult)

        Raises:
            ConfigurationError: searcher 또는 scorer가 없는 경우
        """
        if self.searcher is None or self.scorer is None:
            raise ConfigurationError("Orchestrator에는 searcher와 scorer가 필요합니다")

        log_with_context(
            logger, logging.INFO, "분석 시작",
            mode="analyze_only", product=repr(product_name),
            has_prefs=preferences is not None,
        )
        search_result, initial_score = await self._analyze(product_name, preferences)
        log_with_context(
            logger, logging.INFO, "분석 완료",
            mode="analyze_only", overall_score=f"{initial_score.overall_score:.2f}",
        )
        return search_result, initial_score

    async def analyze_and_improve(
        self,
        product_name: str,
        preferences: UserPreferences | None = None,
    ) -> WorkflowResult:
        """검색 → 평가 → (추천 → 재평가) 루프를 실행합니다.

        Args:
            product_name: 제품명 (OCR 단계에서 추출된 값)
            preferences: 사용자 식이 선호

        Returns:
            WorkflowResult (turns 길이는 0 ~ max_recommendation_turns)

        Raises:
            ConfigurationError: Worker가 하나라도 없는 경우
            AgentError: 어느 단계든 실패한 경우 (phase 속성에 단계 기록)

        Example:
            >>> orchestrator = Orchestrator.create_default(chat_client)
            >>> result = await orchestrator.analyze_and_improve("Sugary Oatmeal")
            >>> print(result.final_score.overall_score, len(result.turns))
        """
        if self.searcher is None or self.scorer is None or self.recommender is None:
            raise ConfigurationError(
                "Orchestrator에는 searcher, scorer, recommender가 모두 필요합니다"
            )

        log_with_context(
            logger, logging.INFO, "워크플로우 시작",
            product=repr(product_name),
            min_score=f"{self.config.min_acceptable_score:.2f}",
            max_turns=self.config.max_recommendation_turns,
            has_prefs=preferences is not None,
        )

        search_result, initial_score = await self._analyze(product_name, preferences)

        turns: list[LoopTurn] = []
        if self._is_acceptable(initial_score):
            status = "accepted"
        else:
            turns = await self._improve(product_name, initial_score, preferences)
            status = "accepted_after_turns" if self._is_acceptable(turns[-1].score) else "exhausted"

        final_score = turns[-1].score if turns else initial_score
        result = WorkflowResult(
            initial_search=search_result,
            initial_score=initial_score,
            final_score=final_score,
            turns=turns,
        )

        log_with_context(
            logger, logging.INFO, "워크플로우 완료",
            status=status, turns=len(turns),
            initial_score=f"{initial_score.overall_score:.2f}",
            final_score=f"{final_score.overall_score:.2f}",
        )
        return result

    async def recommend(self, product_name: str, score: float) -> RecommenderResult:
        """점수가 이미 알려진 제품에 대해 대체 제품만 추천합니다.

        Raises:
            ConfigurationError: recommender가 없는 경우
        """
        if self.recommender is None:
            raise ConfigurationError("Orchestrator에는 recommender가 필요합니다")

        with self._phase("recommend", current_score=f"{score:.2f}"):
            return await self.recommender.recommend(product_name, score)

    async def _analyze(
        self,
        product_name: str,
        preferences: UserPreferences | None,
    ) -> tuple[WebSearchResult, ScorerResult]:
        """Phase 1: 원재료 검색 후 초기 평가."""
        with self._phase("search", product=repr(product_name)):
            search_result = await self.searcher.search(product_name)

        with self._phase("score", ingredients=len(search_result.ingredients)):
            initial_score = await self.scorer.score_ingredients(
                search_result.ingredients, preferences
            )

        return search_result, initial_score

    async def _improve(
        self,
        product_name: str,
        initial_score: ScorerResult,
        preferences: UserPreferences | None,
    ) -> list[LoopTurn]:
        """Phase 2: 임계값에 도달하거나 최대 턴을 소진할 때까지 추천과 재평가를 반복합니다."""
        turns: list[LoopTurn] = []
        current_score = initial_score.overall_score

        for turn in range(1, self.config.max_recommendation_turns + 1):
            with self._phase("recommend", turn=turn, current_score=f"{current_score:.2f}"):
                recommendations = await self.recommender.recommend(product_name, current_score)

            with self._phase(
                "rescore", turn=turn, recommendations=len(recommendations.recommendations)
            ):
                score = await self.scorer.score_recommendations(
                    recommendations.recommendations, preferences
                )

            turns.append(LoopTurn(recommendations=recommendations, score=score))
            # 더 낮아졌더라도 최신 시도를 현재 점수로 사용
            current_score = score.overall_score

            log_with_context(
                logger, logging.INFO, "개선 턴 완료",
                turn=turn, overall_score=f"{current_score:.2f}",
                threshold=f"{self.config.min_acceptable_score:.2f}",
            )

            if self._is_acceptable(score):
                break

        return turns

    def _is_acceptable(self, score: ScorerResult) -> bool:
        return score.overall_score >= self.config.min_acceptable_score

    @contextmanager
    def _phase(self, name: str, **context: Any) -> Iterator[None]:
        """단계 시작/완료/실패를 기록하고 실패한 AgentError에 단계를 표시합니다."""
        start = time.perf_counter()
        log_with_context(logger, logging.INFO, "단계 시작", step=name, **context)
        try:
            yield
        except Exception as e:
            if isinstance(e, AgentError) and e.phase is None:
                e.phase = name
            log_with_context(
                logger, logging.ERROR, "단계 실패",
                step=name, error_type=type(e).__name__, error=e,
            )
            raise
        log_with_context(
            logger, logging.INFO, "단계 완료",
            step=name, duration_ms=int((time.perf_counter() - start) * 1000),
        )

    @classmethod
    def create_default(
        cls,
        chat_client: Any,
        config: WorkflowConfig | None = None,
        runner: AgentRunner | None = None,
        search_tools: list[Any] | None = None,
    ) -> "Orchestrator":
        """기본 설정으로 Orchestrator를 생성합니다.

        세 Worker가 하나의 AgentRunner를 공유합니다.

        Args:
            chat_client: Agent Framework ChatClient
            config: 워크플로우 설정 (기본값: 환경 변수 WORKFLOW_*)
            runner: 모델 호출 게이트웨이
            search_tools: Search/Recommender Worker용 Tool (기본값: hosted 웹 검색)

        Returns:
            Orchestrator 인스턴스

        Example:
            >>> from safebites.utils.config import get_chat_client
            >>> orchestrator = Orchestrator.create_default(get_chat_client())
        """
        runner = runner or AgentRunner()
        if search_tools is None:
            search_tools = [HostedWebSearchTool()]
        if config is None:
            config = WorkflowConfig.from_settings(get_config().workflow)

        searcher = SearchWorker(chat_client, tools=search_tools, runner=runner)
        scorer = ScorerWorker(chat_client, runner=runner)
        recommender = RecommenderWorker(chat_client, tools=search_tools, runner=runner)

        logger.info("기본 Orchestrator 생성 완료")

        return cls(
            searcher=searcher,
            scorer=scorer,
            recommender=recommender,
            config=config,
        )
