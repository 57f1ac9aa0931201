"""모델 호출 게이트웨이.

모든 Worker Agent가 공유하는 단일 호출 경로입니다. 호출마다 일회성 세션을
만들고, 사용자 턴 하나를 보낸 뒤, 응답에서 최종 텍스트를 수집합니다.
"""

import logging
import time
from typing import Any

from ..utils.errors import AgentError, EmptyOutputError, RemoteCallError
from ..utils.logger import get_logger, log_with_context, preview_text
from .session_manager import SessionManager

logger = get_logger(__name__)


class AgentRunner:
    """단일 턴 에이전트 실행기.

    Orchestrator와 Worker는 ``run(app_name, agent, input_text)``에만 의존하므로
    테스트에서는 미리 준비한 응답을 순서대로 돌려주는 대역으로 교체할 수 있습니다.

    Examples:
        >>> runner = AgentRunner()
        >>> text = await runner.run("safebites-search", agent, "Coca-Cola")
    """

    def __init__(self, session_manager: SessionManager | None = None):
        """AgentRunner를 초기화합니다.

        Args:
            session_manager: 세션 관리자 (기본값: 전역 실행 ID 생성기를 쓰는 새 인스턴스)
        """
        self.session_manager = session_manager or SessionManager()

    async def run(self, app_name: str, agent: Any, input_text: str) -> str:
        """에이전트를 한 번 실행하고 최종 텍스트를 반환합니다.

        응답의 메시지와 content를 순서대로 훑으며 공백이 아닌 마지막 텍스트를
        최종 답으로 사용합니다. 이전 조각을 이어 붙이지 않습니다.

        Args:
            app_name: 호출한 애플리케이션 이름 (로깅 및 세션 식별용)
            agent: Agent Framework ChatAgent (또는 같은 run() 인터페이스)
            input_text: 사용자 턴으로 보낼 텍스트

        Returns:
            앞뒤 공백이 제거된 최종 텍스트

        Raises:
            SessionCreationError: 세션을 만들 수 없는 경우
            RemoteCallError: 모델 호출 중 오류가 발생한 경우
            EmptyOutputError: 공백이 아닌 텍스트가 하나도 없는 경우
        """
        start = time.perf_counter()
        log_with_context(
            logger,
            logging.INFO,
            "에이전트 실행 시작",
            app=app_name,
            input_len=len(input_text),
            input_preview=repr(preview_text(input_text)),
        )

        session_id = self.session_manager.create_session(app_name)
        try:
            thread = self.session_manager.get_thread(session_id)
            try:
                response = await agent.run(input_text, thread=thread)
            except AgentError:
                raise
            except Exception as e:
                log_with_context(
                    logger, logging.ERROR, "에이전트 실행 실패",
                    app=app_name, stage="run", error=e,
                )
                raise RemoteCallError(f"에이전트 실행 실패 ({app_name}): {e}") from e
        finally:
            self.session_manager.delete_session(session_id)

        # messages[].contents[] 순서가 스트림 순서. 텍스트가 아닌 content는 text가 None
        messages = getattr(response, "messages", None) or []
        message_count = len(messages)
        parts_count = 0
        output = ""
        for message in messages:
            for content in getattr(message, "contents", None) or []:
                parts_count += 1
                text = getattr(content, "text", None)
                if isinstance(text, str) and text.strip():
                    output = text

        duration_ms = int((time.perf_counter() - start) * 1000)

        if not output.strip():
            log_with_context(
                logger, logging.ERROR, "에이전트 실행 실패",
                app=app_name, stage="empty_output", duration_ms=duration_ms,
                messages=message_count, parts=parts_count,
            )
            raise EmptyOutputError(f"에이전트가 빈 응답을 반환했습니다 ({app_name})")

        output = output.strip()
        log_with_context(
            logger,
            logging.INFO,
            "에이전트 실행 완료",
            app=app_name,
            duration_ms=duration_ms,
            messages=message_count,
            parts=parts_count,
            output_len=len(output),
            output_preview=repr(preview_text(output)),
        )
        return output
