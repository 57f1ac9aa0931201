#!/usr/bin/env python3
"""SafeBites 워크플로우 데모 스크립트

제품명(또는 제품 이미지)으로 원재료 검색 → 안전성 평가 → 대체 제품 추천
루프를 실행하고 결과를 출력합니다.

실행 방법:
    python examples/demo_workflow.py "Sugary Oatmeal"
    python examples/demo_workflow.py --image product.png

환경 변수 필요:
    - AZURE_OPENAI_ENDPOINT
    - AZURE_OPENAI_API_KEY (없으면 DefaultAzureCredential)
    - AZURE_OPENAI_DEPLOYMENT_NAME (선택, 기본값: gpt-4o)
    - WORKFLOW_MIN_ACCEPTABLE_SCORE, WORKFLOW_MAX_RECOMMENDATION_TURNS (선택)
"""

import argparse
import asyncio
import mimetypes
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# .env 파일 명시적으로 로드
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

from safebites.orchestrator import Orchestrator, WorkflowResult
from safebites.services import AnalyzeService, VisionOCR
from safebites.utils.config import get_chat_client
from safebites.utils.errors import AgentError
from safebites.utils.logger import get_logger
from safebites.workers.models import UserPreferences

logger = get_logger(__name__)


def print_separator(char: str = "=", length: int = 80) -> None:
    """구분선을 출력합니다."""
    print(char * length)


def print_header(title: str) -> None:
    """헤더를 출력합니다."""
    print_separator()
    print(f"  {title}")
    print_separator()
    print()


def print_result(product_name: str, result: WorkflowResult, elapsed: float) -> None:
    """워크플로우 결과를 출력합니다."""
    print_header(f"📊 {product_name}")

    print(f"🧾 원재료: {len(result.initial_search.ingredients)}개")
    for ingredient in result.initial_search.ingredients[:10]:
        print(f"   - {ingredient.name}: {ingredient.description}")
    print()

    print(f"🔎 초기 점수: {result.initial_score.overall_score:.1f}")
    for score in result.initial_score.ingredient_scores:
        print(f"   - {score.ingredient_name} [{score.safety_score}] {score.reasoning}")
    print()

    for index, turn in enumerate(result.turns, 1):
        print(f"🔁 개선 턴 {index}: 점수 {turn.score.overall_score:.1f}")
        for rec in turn.recommendations.recommendations:
            print(f"   - {rec.product_name} ({rec.health_score}): {rec.reason}")
        print()

    print(f"✅ 최종 점수: {result.final_score.overall_score:.1f}")
    print(f"⏱️  소요 시간: {elapsed:.2f}초")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SafeBites 워크플로우 데모")
    parser.add_argument("product", nargs="?", help="제품명")
    parser.add_argument("--image", type=Path, help="제품 이미지 경로 (OCR로 제품명 추출)")
    parser.add_argument("--allergy", action="append", default=[], help="알레르기 성분")
    parser.add_argument("--goal", action="append", default=[], help="식단 목표")
    parser.add_argument("--avoid", action="append", default=[], help="회피 성분")
    args = parser.parse_args()
    if not args.product and not args.image:
        parser.error("제품명 또는 --image 중 하나가 필요합니다")
    return args


async def run_demo(args: argparse.Namespace) -> None:
    """데모를 실행합니다."""
    print_header("🧪 SafeBites 워크플로우 데모")

    print("🔧 초기화 중...")
    try:
        chat_client = get_chat_client()
        orchestrator = Orchestrator.create_default(chat_client)
        print("   ✓ Orchestrator 생성 완료")
        print()
    except AgentError as e:
        print(f"❌ 초기화 실패: {e}")
        logger.exception("초기화 중 에러 발생")
        sys.exit(1)

    preferences = UserPreferences(
        allergies=args.allergy,
        diet_goals=args.goal,
        avoid_ingredients=args.avoid,
    )

    start_time = datetime.now()
    try:
        if args.image:
            mime_type = mimetypes.guess_type(args.image.name)[0] or "image/jpeg"
            service = AnalyzeService(VisionOCR(chat_client), orchestrator)
            product_name, result = await service.analyze(
                args.image.read_bytes(), mime_type, preferences
            )
        else:
            product_name = args.product
            result = await orchestrator.analyze_and_improve(product_name, preferences)
    except AgentError as e:
        print(f"❌ 워크플로우 실패 (phase={e.phase}): {e}")
        logger.exception("워크플로우 실행 중 에러 발생")
        sys.exit(1)

    elapsed = (datetime.now() - start_time).total_seconds()
    print_result(product_name, result, elapsed)


def main() -> None:
    """메인 함수."""
    args = parse_args()
    try:
        asyncio.run(run_demo(args))
    except KeyboardInterrupt:
        print("\n\n⚠️  사용자에 의해 중단되었습니다.")
        sys.exit(0)


if __name__ == "__main__":
    main()
