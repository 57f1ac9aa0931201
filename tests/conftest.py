"""공통 pytest fixture."""

from unittest.mock import Mock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_chat_agent():
    """Worker가 생성하는 ChatAgent를 Mock으로 대체합니다.

    호출마다 서로 다른 Mock을 반환하므로 Worker가 어떤 Agent로 게이트웨이를
    호출했는지 구분할 수 있습니다.
    """
    with patch("safebites.workers.base.ChatAgent") as MockChatAgent:
        MockChatAgent.side_effect = lambda **kwargs: Mock(spec=["run"])
        yield MockChatAgent
