"""SafeBites 제품 안전성 분석 에이전트.

원재료 검색, 안전성 평가, 대체 제품 추천 에이전트를 조합한 워크플로우를 제공합니다.
"""

__version__ = "0.1.0"
