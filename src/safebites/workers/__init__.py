"""Worker Agent 모듈.

원재료 검색, 안전성 평가, 대체 제품 추천을 담당합니다.
"""

from .base import BaseWorker
from .recommender import RecommenderWorker
from .scorer import ScorerWorker
from .search import SearchWorker

__all__ = ["BaseWorker", "SearchWorker", "ScorerWorker", "RecommenderWorker"]
