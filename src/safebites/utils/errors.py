"""커스텀 예외 클래스 정의.

에이전트 파이프라인 전반에서 사용되는 예외 계층 구조를 제공합니다.
모든 예외는 AgentError를 상속하며, Orchestrator는 실패한 단계를
``phase`` 속성에 기록합니다.
"""


class AgentError(Exception):
    """Agent 관련 모든 예외의 베이스 클래스.

    Attributes:
        phase: 실패가 발생한 워크플로우 단계 (search, score, recommend, rescore)
    """

    def __init__(self, message: str = "", phase: str | None = None):
        super().__init__(message)
        self.phase = phase


class ConfigurationError(AgentError):
    """설정 관련 예외.

    환경 변수 누락, 필수 Agent 미주입 등의 경우 발생합니다.
    """

    pass


class InvalidArgumentError(AgentError):
    """잘못된 입력값 예외.

    빈 제품명, 음수 점수 등의 경우 원격 호출 없이 발생합니다.
    """

    pass


class SessionCreationError(AgentError):
    """세션 생성 실패 예외."""

    pass


class RemoteCallError(AgentError):
    """모델 호출 실패 예외.

    전송 오류 또는 원격 측 오류를 감쌉니다.
    """

    pass


class EmptyOutputError(AgentError):
    """모델이 사용 가능한 텍스트를 반환하지 않은 경우 발생합니다."""

    pass


class ParseError(AgentError):
    """모델 출력을 기대한 스키마로 해석할 수 없는 경우 발생합니다."""

    pass


class NoJSONObjectFoundError(ParseError):
    """응답 텍스트에서 유효한 JSON 객체를 찾지 못한 경우 발생합니다."""

    pass
