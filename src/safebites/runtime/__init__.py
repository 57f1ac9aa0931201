"""모델 호출 런타임 모듈.

일회성 세션 관리와 단일 턴 에이전트 실행을 담당합니다.
"""

from .runner import AgentRunner
from .session_manager import RunIdGenerator, SessionManager, get_run_id_generator

__all__ = ["AgentRunner", "SessionManager", "RunIdGenerator", "get_run_id_generator"]
