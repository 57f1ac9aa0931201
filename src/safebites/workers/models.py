"""Worker Agent 데이터 모델.

모델 출력(JSON)을 타입이 있는 값으로 변환합니다. 모든 모델은 생성 후
변경할 수 없습니다.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _coerce_label(value: Any) -> Any:
    """안전 등급 값을 문자열로 정규화합니다.

    모델은 "LOW" 같은 문자열 대신 3 같은 숫자를 반환하기도 합니다.
    숫자는 문자열로 바꾸고, 그 외 타입은 그대로 두어 검증에서 거부되게 합니다.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


# LOW | MEDIUM | HIGH 로 지시하지만 값 자체는 검증하지 않음
SafetyLabel = Annotated[str, BeforeValidator(_coerce_label)]


class Ingredient(BaseModel):
    """원재료 정보."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""


class WebSearchResult(BaseModel):
    """Search Agent 결과.

    모델에는 ``List_of_ingredients`` 키로 응답하도록 지시합니다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ingredients: list[Ingredient] = Field(
        default_factory=list, alias="List_of_ingredients"
    )


class IngredientScore(BaseModel):
    """원재료별 안전 등급."""

    model_config = ConfigDict(frozen=True)

    ingredient_name: str = ""
    safety_score: SafetyLabel = ""
    reasoning: str = ""


class ScorerResult(BaseModel):
    """Scorer Agent 결과.

    overall_score는 모델이 계산한 값으로, ingredient_scores와의 일관성이나
    0~10 범위를 별도로 검증하지 않습니다. 숫자가 아닌 값(true, "7.5" 등)은
    변환하지 않고 거부합니다.
    """

    model_config = ConfigDict(frozen=True)

    ingredient_scores: list[IngredientScore] = Field(default_factory=list)
    overall_score: float = Field(strict=True)


class Recommendation(BaseModel):
    """대체 제품 추천."""

    model_config = ConfigDict(frozen=True)

    product_name: str = ""
    health_score: SafetyLabel = ""
    reason: str = ""


class RecommenderResult(BaseModel):
    """Recommender Agent 결과. 프롬프트상 3개지만 개수는 보장되지 않습니다."""

    model_config = ConfigDict(frozen=True)

    recommendations: list[Recommendation] = Field(default_factory=list)


class UserPreferences(BaseModel):
    """사용자 식이 선호 정보."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "allergies": ["peanuts"],
                "dietGoals": ["low-sugar"],
                "avoidIngredients": ["aspartame"],
            }
        },
    )

    allergies: list[str] = Field(default_factory=list)
    diet_goals: list[str] = Field(default_factory=list, alias="dietGoals")
    avoid_ingredients: list[str] = Field(
        default_factory=list, alias="avoidIngredients"
    )
