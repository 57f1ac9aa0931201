"""이미지 기반 제품 분석 서비스."""

from typing import Protocol

from ..orchestrator.models import WorkflowResult
from ..utils.errors import ConfigurationError, EmptyOutputError, InvalidArgumentError
from ..utils.logger import get_logger
from ..workers.models import UserPreferences
from .vision import DEFAULT_MIME_TYPE

logger = get_logger(__name__)


class ProductNameExtractor(Protocol):
    async def extract_product_name(self, image_bytes: bytes, mime_type: str) -> str: ...


class AnalyzeWorkflow(Protocol):
    async def analyze_and_improve(
        self, product_name: str, preferences: UserPreferences | None = None
    ) -> WorkflowResult: ...


class AnalyzeService:
    """OCR로 제품명을 읽은 뒤 전체 분석/개선 워크플로우를 실행합니다."""

    def __init__(
        self,
        vision: ProductNameExtractor | None,
        orchestrator: AnalyzeWorkflow | None,
    ):
        self.vision = vision
        self.orchestrator = orchestrator

    async def analyze(
        self,
        image_bytes: bytes,
        mime_type: str = DEFAULT_MIME_TYPE,
        preferences: UserPreferences | None = None,
    ) -> tuple[str, WorkflowResult]:
        """이미지를 분석합니다.

        Args:
            image_bytes: 제품 이미지
            mime_type: 이미지 MIME 타입 (비어 있으면 image/jpeg)
            preferences: 사용자 식이 선호

        Returns:
            (제품명, WorkflowResult)

        Raises:
            ConfigurationError: vision 또는 orchestrator가 없는 경우
            InvalidArgumentError: 이미지가 비어 있는 경우
            EmptyOutputError: OCR 결과가 비어 있는 경우
        """
        if self.vision is None:
            raise ConfigurationError("AnalyzeService에는 vision이 필요합니다")
        if self.orchestrator is None:
            raise ConfigurationError("AnalyzeService에는 orchestrator가 필요합니다")
        if not image_bytes:
            raise InvalidArgumentError("이미지 데이터는 필수입니다")
        if not mime_type or not mime_type.strip():
            mime_type = DEFAULT_MIME_TYPE

        product_name = await self.vision.extract_product_name(image_bytes, mime_type)
        product_name = (product_name or "").strip()
        if not product_name:
            raise EmptyOutputError("제품명 추출 결과가 비어 있습니다")

        logger.info(f"이미지 분석 시작: product='{product_name}'")
        result = await self.orchestrator.analyze_and_improve(product_name, preferences)
        return product_name, result
