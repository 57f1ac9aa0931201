"""Worker 데이터 모델 테스트."""

import pytest
from pydantic import ValidationError

from safebites.workers.models import (
    IngredientScore,
    RecommenderResult,
    ScorerResult,
    UserPreferences,
    WebSearchResult,
)


class TestWebSearchResult:
    def test_parses_alias_key(self):
        result = WebSearchResult.model_validate_json(
            '{"List_of_ingredients": [{"name": "Sugar", "description": "Sweetener"}]}'
        )

        assert result.ingredients[0].name == "Sugar"
        assert result.ingredients[0].description == "Sweetener"

    def test_missing_fields_default(self):
        result = WebSearchResult.model_validate_json('{"List_of_ingredients": [{}]}')

        assert result.ingredients[0].name == ""
        assert WebSearchResult.model_validate_json("{}").ingredients == []

    def test_frozen(self):
        result = WebSearchResult.model_validate_json('{"List_of_ingredients": []}')

        with pytest.raises(ValidationError):
            result.ingredients = []


class TestSafetyLabel:
    """안전 등급은 문자열과 숫자를 모두 허용합니다."""

    def test_string_label(self):
        score = IngredientScore.model_validate({"safety_score": "LOW"})
        assert score.safety_score == "LOW"

    @pytest.mark.parametrize("raw, expected", [(3, "3"), (7.5, "7.5")])
    def test_number_label(self, raw, expected):
        score = IngredientScore.model_validate({"safety_score": raw})
        assert score.safety_score == expected

    def test_recommendation_health_score_number(self):
        result = RecommenderResult.model_validate_json(
            '{"recommendations": [{"product_name": "Oats", "health_score": 9}]}'
        )
        assert result.recommendations[0].health_score == "9"

    @pytest.mark.parametrize("raw", [True, ["LOW"], {"level": "LOW"}, None])
    def test_other_types_rejected(self, raw):
        with pytest.raises(ValidationError):
            IngredientScore.model_validate({"safety_score": raw})


class TestScorerResult:
    def test_overall_score_required(self):
        with pytest.raises(ValidationError):
            ScorerResult.model_validate_json('{"ingredient_scores": []}')

    def test_out_of_range_score_kept(self):
        """범위 검증 없이 모델이 준 값을 그대로 사용합니다."""
        result = ScorerResult.model_validate_json('{"overall_score": 12.5}')
        assert result.overall_score == 12.5

    def test_integer_score(self):
        result = ScorerResult.model_validate_json('{"overall_score": 8}')
        assert result.overall_score == 8.0

    @pytest.mark.parametrize("raw", ["true", '"7.5"', "null", "[7.5]"])
    def test_non_numeric_score_rejected(self, raw):
        """숫자가 아닌 overall_score는 변환하지 않고 거부합니다."""
        with pytest.raises(ValidationError):
            ScorerResult.model_validate_json(f'{{"overall_score": {raw}}}')


class TestUserPreferences:
    def test_parses_camel_case(self):
        prefs = UserPreferences.model_validate(
            {"allergies": ["peanuts"], "dietGoals": ["low-sugar"], "avoidIngredients": ["MSG"]}
        )

        assert prefs.diet_goals == ["low-sugar"]
        assert prefs.avoid_ingredients == ["MSG"]

    def test_populate_by_name(self):
        prefs = UserPreferences(diet_goals=["vegan"])
        assert prefs.diet_goals == ["vegan"]

    def test_dump_by_alias(self):
        prefs = UserPreferences(allergies=["milk"], diet_goals=["keto"])

        assert prefs.model_dump(by_alias=True) == {
            "allergies": ["milk"],
            "dietGoals": ["keto"],
            "avoidIngredients": [],
        }
