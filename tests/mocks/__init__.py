"""테스트용 Mock 게이트웨이와 Agent 응답

실제 Azure OpenAI 없이 워크플로우를 검증할 수 있도록, 미리 준비한 응답을
순서대로 돌려주는 AgentRunner 대역과 Agent Framework 응답 구조를 흉내 내는
객체를 제공합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from safebites.utils.errors import RemoteCallError


class ScriptedRunner:
    """테스트용 AgentRunner 대역

    AgentRunner와 같은 ``run(app_name, agent, input_text)`` 인터페이스를 제공하며,
    생성 시 전달한 응답을 호출 순서대로 반환합니다. 예외 인스턴스를 넣으면
    해당 순서에서 예외를 발생시킵니다.

    Examples:
        >>> runner = ScriptedRunner('{"List_of_ingredients": []}')
        >>> await runner.run("safebites-search", agent, "Cola")
        '{"List_of_ingredients": []}'
        >>> runner.calls[0]["app_name"]
        'safebites-search'
    """

    def __init__(self, *responses: str | BaseException):
        self.responses: list[str | BaseException] = list(responses)
        self.calls: list[dict[str, Any]] = []

    async def run(self, app_name: str, agent: Any, input_text: str) -> str:
        self.calls.append(
            {"app_name": app_name, "agent": agent, "input_text": input_text}
        )
        if not self.responses:
            raise RemoteCallError("준비된 응답이 없습니다")

        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def app_names(self) -> list[str]:
        return [call["app_name"] for call in self.calls]


@dataclass
class FakeContent:
    """TextContent / FunctionCallContent 대역 (텍스트가 없으면 None)."""

    text: str | None = None


@dataclass
class FakeMessage:
    contents: list[FakeContent] = field(default_factory=list)


@dataclass
class FakeResponse:
    """AgentRunResponse 대역."""

    messages: list[FakeMessage] = field(default_factory=list)


def make_response(*messages: list[str | None]) -> FakeResponse:
    """메시지별 content 텍스트 목록으로 FakeResponse를 만듭니다.

    Example:
        >>> make_response(["생각 중..."], [None, '{"a": 1}'])
    """
    return FakeResponse(
        messages=[
            FakeMessage(contents=[FakeContent(text=text) for text in texts])
            for texts in messages
        ]
    )


class FakeAgent:
    """ChatAgent.run() 대역

    고정 응답을 반환하거나 지정한 예외를 발생시키며, 호출 인자를 기록합니다.
    """

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: BaseException | None = None,
    ):
        self.response = response or FakeResponse()
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def run(self, messages: Any, thread: Any = None, **kwargs: Any) -> FakeResponse:
        self.calls.append({"messages": messages, "thread": thread})
        if self.error is not None:
            raise self.error
        return self.response
