"""워크플로우 통합 테스트

실제 Azure OpenAI와 연동하여 Worker와 Orchestrator의 동작을 검증합니다.

환경변수 설정 필요:
- AZURE_OPENAI_ENDPOINT
- AZURE_OPENAI_API_KEY (없으면 DefaultAzureCredential)
- AZURE_OPENAI_DEPLOYMENT_NAME (선택, 기본값: gpt-4o)

주의: 실제 API 비용이 발생합니다.
"""

import os

import pytest

from safebites.orchestrator.models import WorkflowConfig
from safebites.orchestrator.workflow import Orchestrator
from safebites.utils.config import get_chat_client, reset_config
from safebites.workers.models import UserPreferences
from safebites.workers.search import SearchWorker

pytestmark = pytest.mark.integration


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_chat_agent():
    """공통 ChatAgent 패치를 해제하고 실제 Agent를 사용합니다."""
    yield None


@pytest.fixture
def chat_client():
    """실제 Azure OpenAI Responses 클라이언트 생성."""
    if not os.getenv("AZURE_OPENAI_ENDPOINT"):
        pytest.skip("환경변수 누락: AZURE_OPENAI_ENDPOINT")

    reset_config()
    return get_chat_client()


# ============================================================================
# Tests
# ============================================================================

@pytest.mark.asyncio
async def test_search_worker_finds_ingredients(chat_client):
    """잘 알려진 제품의 원재료를 찾아야 합니다."""
    from agent_framework import HostedWebSearchTool

    worker = SearchWorker(chat_client, tools=[HostedWebSearchTool()])

    result = await worker.search("Coca-Cola Classic")

    assert len(result.ingredients) > 0
    assert all(ingredient.name for ingredient in result.ingredients)


@pytest.mark.asyncio
async def test_full_workflow(chat_client):
    """검색부터 개선 루프까지 전체 워크플로우가 완료되어야 합니다."""
    config = WorkflowConfig(min_acceptable_score=7.0, max_recommendation_turns=1)
    orchestrator = Orchestrator.create_default(chat_client, config=config)

    result = await orchestrator.analyze_and_improve(
        "Froot Loops cereal",
        UserPreferences(diet_goals=["low-sugar"]),
    )

    assert len(result.initial_search.ingredients) > 0
    assert len(result.turns) <= 1
    if result.turns:
        assert result.final_score == result.turns[-1].score
    else:
        assert result.final_score == result.initial_score
