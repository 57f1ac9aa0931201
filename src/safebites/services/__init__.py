"""서비스 모듈.

이미지 OCR과 워크플로우를 묶는 상위 진입점을 제공합니다.
"""

from .analyze import AnalyzeService
from .recommend import RecommendService
from .vision import VisionOCR

__all__ = ["AnalyzeService", "RecommendService", "VisionOCR"]
