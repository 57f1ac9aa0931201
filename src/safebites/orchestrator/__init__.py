"""Orchestrator 모듈.

Worker Agent를 순서대로 호출하는 분석/개선 워크플로우를 담당합니다.
"""

from .models import LoopTurn, WorkflowConfig, WorkflowResult
from .workflow import Orchestrator

__all__ = ["Orchestrator", "WorkflowConfig", "WorkflowResult", "LoopTurn"]
