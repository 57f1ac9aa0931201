"""이미지에서 제품명을 추출하는 Vision OCR.

에이전트가 아닌 ChatClient 직접 호출입니다. 세션이나 Tool 없이 이미지와
OCR 프롬프트를 한 메시지로 보냅니다.
"""

from typing import Any

from agent_framework import ChatMessage, DataContent, TextContent

from ..utils.errors import (
    AgentError,
    ConfigurationError,
    EmptyOutputError,
    InvalidArgumentError,
    RemoteCallError,
)
from ..utils.logger import get_logger
from ..workers.prompts import VISION_OCR_PROMPT

logger = get_logger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"
SUPPORTED_MIME_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/heic", "image/heif"}
)


def is_supported_mime_type(mime_type: str) -> bool:
    """지원하는 이미지 MIME 타입인지 확인합니다 (대소문자 무시)."""
    return mime_type.strip().lower() in SUPPORTED_MIME_TYPES


class VisionOCR:
    """제품 이미지에서 제품명을 읽어옵니다.

    Examples:
        >>> ocr = VisionOCR(chat_client)
        >>> name = await ocr.extract_product_name(image_bytes, "image/png")
        >>> print(name)
        'Coca-Cola Zero'
    """

    def __init__(self, chat_client: Any):
        """VisionOCR를 초기화합니다.

        Args:
            chat_client: 이미지 입력을 지원하는 Agent Framework ChatClient
        """
        self.chat_client = chat_client

    async def extract_product_name(
        self, image_bytes: bytes, mime_type: str = DEFAULT_MIME_TYPE
    ) -> str:
        """이미지에서 제품명을 추출합니다.

        Args:
            image_bytes: 이미지 바이트
            mime_type: 이미지 MIME 타입 (비어 있으면 image/jpeg)

        Returns:
            앞뒤 공백이 제거된 제품명

        Raises:
            InvalidArgumentError: 이미지가 비어 있거나 지원하지 않는 MIME 타입인 경우
            ConfigurationError: chat_client가 없는 경우
            RemoteCallError: 모델 호출 실패
            EmptyOutputError: 모델이 빈 텍스트를 반환한 경우
        """
        if not image_bytes:
            raise InvalidArgumentError("이미지 데이터는 필수입니다")
        if self.chat_client is None:
            raise ConfigurationError("VisionOCR에는 chat_client가 필요합니다")

        mime_type = (mime_type or "").strip().lower() or DEFAULT_MIME_TYPE
        if not is_supported_mime_type(mime_type):
            raise InvalidArgumentError(f"지원하지 않는 이미지 형식입니다: {mime_type}")

        message = ChatMessage(
            role="user",
            contents=[
                DataContent(data=image_bytes, media_type=mime_type),
                TextContent(text=VISION_OCR_PROMPT),
            ],
        )

        logger.info(f"제품명 OCR 시작: bytes={len(image_bytes)}, mime_type={mime_type}")
        try:
            response = await self.chat_client.get_response([message])
        except AgentError:
            raise
        except Exception as e:
            logger.error(f"제품명 OCR 실패: {e}")
            raise RemoteCallError(f"Vision 호출 실패: {e}") from e

        text = getattr(response, "text", None) or ""
        if not text.strip():
            raise EmptyOutputError("Vision 응답이 비어 있습니다")

        product_name = text.strip()
        logger.info(f"제품명 OCR 완료: product='{product_name}'")
        return product_name
