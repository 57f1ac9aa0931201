"""에이전트 실행용 일회성 세션 관리.

Agent Framework의 AgentThread를 활용하여 모델 호출마다 세션을 만들고
호출이 끝나면 제거합니다.
"""

import itertools
import threading
import time
from datetime import datetime

from agent_framework import AgentThread, ChatMessageStore
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..utils.errors import SessionCreationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

USER_ID_PREFIX = "safebites-agent-"
SESSION_ID_PREFIX = "safebites-session-"


class Session(BaseModel):
    """세션 메타데이터."""

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., description="세션 고유 ID")
    user_id: str = Field(..., description="에이전트 사용자 ID")
    app_name: str = Field(..., description="호출한 애플리케이션 이름")
    created_at: datetime = Field(default_factory=datetime.now, description="세션 생성 시각")

    @field_serializer("created_at")
    def serialize_datetime(self, value: datetime) -> str:
        """datetime을 ISO 형식으로 직렬화."""
        return value.isoformat()


class RunIdGenerator:
    """프로세스 전역 실행 ID 생성기.

    단조 증가 카운터와 나노초 타임스탬프를 조합하므로 동시에 실행되는
    워크플로우끼리도 ID가 충돌하지 않습니다.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """새 실행 ID를 반환합니다.

        Example:
            >>> RunIdGenerator().next_id()
            '1760870000000000000-1'
        """
        with self._lock:
            sequence = next(self._counter)
        return f"{time.time_ns()}-{sequence}"


_run_id_generator = RunIdGenerator()


def get_run_id_generator() -> RunIdGenerator:
    """전역 RunIdGenerator 인스턴스를 반환합니다."""
    return _run_id_generator


class SessionManager:
    """일회성 세션 생성 및 제거.

    - AgentThread: 호출 한 번 동안의 메시지 저장소
    - 메타데이터: user_id, app_name, 생성 시각
    """

    def __init__(self, run_ids: RunIdGenerator | None = None):
        """SessionManager를 초기화합니다.

        Args:
            run_ids: 실행 ID 생성기 (기본값: 전역 생성기)
        """
        self.run_ids = run_ids or get_run_id_generator()
        self.threads: dict[str, AgentThread] = {}  # {session_id: AgentThread}
        self.metadata: dict[str, Session] = {}  # {session_id: Session}

    def create_session(self, app_name: str) -> str:
        """새 세션을 생성합니다.

        Args:
            app_name: 호출한 애플리케이션 이름 (예: "safebites-search")

        Returns:
            session_id: 생성된 세션 ID

        Raises:
            SessionCreationError: app_name이 비어 있거나 스레드 생성에 실패한 경우

        Example:
            >>> manager = SessionManager()
            >>> session_id = manager.create_session("safebites-search")
        """
        if not app_name or not app_name.strip():
            raise SessionCreationError("세션 생성 실패: app_name은 필수입니다")

        run_id = self.run_ids.next_id()
        session_id = SESSION_ID_PREFIX + run_id

        try:
            # 로컬 관리이므로 message_store만 사용
            thread = AgentThread(message_store=ChatMessageStore())
        except Exception as e:
            logger.error(f"세션 생성 실패: app={app_name}, error={e}")
            raise SessionCreationError(f"세션 생성 실패: {e}") from e

        self.threads[session_id] = thread
        self.metadata[session_id] = Session(
            session_id=session_id,
            user_id=USER_ID_PREFIX + run_id,
            app_name=app_name,
        )

        logger.debug(f"세션 생성 완료: session_id={session_id}, app={app_name}")
        return session_id

    def get_session(self, session_id: str) -> Session | None:
        """세션 정보를 조회합니다."""
        return self.metadata.get(session_id)

    def get_thread(self, session_id: str) -> AgentThread | None:
        """AgentThread 인스턴스를 반환합니다."""
        return self.threads.get(session_id)

    def delete_session(self, session_id: str) -> None:
        """세션을 삭제합니다. 없는 세션이면 아무 일도 하지 않습니다."""
        self.threads.pop(session_id, None)
        self.metadata.pop(session_id, None)
        logger.debug(f"세션 삭제: {session_id}")

    def get_session_count(self) -> int:
        """활성 세션 수를 반환합니다."""
        return len(self.metadata)
