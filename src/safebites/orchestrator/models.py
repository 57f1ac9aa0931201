"""Orchestrator 데이터 모델.

워크플로우 설정과 누적 결과 구조를 정의합니다.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.config import (
    DEFAULT_MAX_RECOMMENDATION_TURNS,
    DEFAULT_MIN_ACCEPTABLE_SCORE,
    WorkflowSettings,
)
from ..workers.models import RecommenderResult, ScorerResult, WebSearchResult


class WorkflowConfig(BaseModel):
    """개선 루프 설정.

    0 이하의 값은 기본값으로 대체됩니다 (임계값이나 반복 횟수가 0/음수가 되지 않음).
    """

    model_config = ConfigDict(frozen=True)

    min_acceptable_score: float = Field(
        default=DEFAULT_MIN_ACCEPTABLE_SCORE, description="수용 임계 점수"
    )
    max_recommendation_turns: int = Field(
        default=DEFAULT_MAX_RECOMMENDATION_TURNS, description="최대 추천 반복 횟수"
    )

    @field_validator("min_acceptable_score")
    @classmethod
    def _default_min_score(cls, value: float) -> float:
        return value if value > 0 else DEFAULT_MIN_ACCEPTABLE_SCORE

    @field_validator("max_recommendation_turns")
    @classmethod
    def _default_max_turns(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_MAX_RECOMMENDATION_TURNS

    @classmethod
    def from_settings(cls, settings: WorkflowSettings) -> "WorkflowConfig":
        """환경 변수 설정으로부터 WorkflowConfig를 생성합니다."""
        return cls(
            min_acceptable_score=settings.min_acceptable_score,
            max_recommendation_turns=settings.max_recommendation_turns,
        )


class LoopTurn(BaseModel):
    """개선 루프 1회분 결과 (추천 + 재평가)."""

    model_config = ConfigDict(frozen=True)

    recommendations: RecommenderResult
    score: ScorerResult


class WorkflowResult(BaseModel):
    """워크플로우 최종 결과.

    final_score는 마지막으로 시도한 평가 결과이며, 이전 턴보다 낮더라도
    가장 좋았던 점수로 되돌리지 않습니다.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "initial_search": {
                    "ingredients": [{"name": "Sugar", "description": "Sweetener"}]
                },
                "initial_score": {"ingredient_scores": [], "overall_score": 2.1},
                "final_score": {"ingredient_scores": [], "overall_score": 8.3},
                "turns": [],
            }
        },
    )

    initial_search: WebSearchResult
    initial_score: ScorerResult
    final_score: ScorerResult
    turns: list[LoopTurn] = Field(default_factory=list)
