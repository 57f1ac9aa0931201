"""모델 응답에서 JSON을 복구하는 파서.

모델은 JSON을 마크다운 코드 펜스로 감싸거나 설명 문장 사이에 끼워
반환하는 경우가 많습니다. 이 모듈은 그런 텍스트에서 하나의 유효한
JSON 객체를 추출합니다.
"""

import json

from .errors import NoJSONObjectFoundError

CODE_FENCE = "```"
_LANGUAGE_TAGS = {"json", "JSON"}


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON constant: {name}")


def is_valid_json(text: str) -> bool:
    """문자열이 RFC 8259 기준으로 유효한 JSON 문서인지 확인합니다.

    Python의 json 모듈이 허용하는 NaN, Infinity는 거부합니다.
    """
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def strip_json_code_fences(raw: str) -> str:
    """텍스트를 감싼 마크다운 코드 펜스를 제거합니다.

    Args:
        raw: 모델 응답 원문

    Returns:
        펜스와 언어 태그(json/JSON)가 제거된 텍스트.
        펜스로 시작하지 않으면 공백만 제거된 원문.

    Example:
        >>> strip_json_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    trimmed = raw.strip()
    if not trimmed.startswith(CODE_FENCE):
        return trimmed

    trimmed = trimmed[len(CODE_FENCE):].strip()

    first_line, newline, rest = trimmed.partition("\n")
    if newline and first_line.strip() in _LANGUAGE_TAGS:
        trimmed = rest.strip()

    if trimmed.endswith(CODE_FENCE):
        trimmed = trimmed[: -len(CODE_FENCE)]

    return trimmed.strip()


def _scan_object_end(text: str, start: int) -> int:
    """start 위치의 '{'와 짝이 맞는 '}'의 인덱스를 반환합니다.

    문자열 리터럴 내부의 중괄호와 이스케이프된 따옴표는 무시합니다.
    짝이 맞지 않으면 -1을 반환합니다.
    """
    depth = 0
    in_string = False
    escape = False

    for index in range(start, len(text)):
        ch = text[index]

        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return index

    return -1


def extract_json_object(raw: str) -> str:
    """모델 응답에서 첫 번째 유효한 JSON 객체를 추출합니다.

    1. 코드 펜스를 제거합니다.
    2. 남은 텍스트가 그대로 유효한 JSON이면 반환합니다.
    3. 아니면 '{'부터 깊이를 추적하며 균형 잡힌 후보를 잘라내어 검증합니다.
       후보가 유효하지 않으면 다음 '{'부터 다시 탐색합니다.

    Args:
        raw: 모델 응답 원문

    Returns:
        JSON 문자열 (자기 자신에 다시 적용해도 같은 결과)

    Raises:
        NoJSONObjectFoundError: 유효한 JSON 객체가 없는 경우

    Example:
        >>> extract_json_object('결과입니다: {"overall_score": 7.5} 끝.')
        '{"overall_score": 7.5}'
    """
    trimmed = strip_json_code_fences(raw)
    if is_valid_json(trimmed):
        return trimmed

    start = trimmed.find("{")
    while start != -1:
        end = _scan_object_end(trimmed, start)
        if end == -1:
            break

        candidate = trimmed[start : end + 1].strip()
        if is_valid_json(candidate):
            return candidate

        start = trimmed.find("{", start + 1)

    raise NoJSONObjectFoundError("에이전트 응답에서 유효한 JSON 객체를 찾을 수 없습니다")
