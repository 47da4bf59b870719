"""배포된 Gateway API 스모크 테스트 스크립트

사용법:
    python scripts/smoke_api.py <GATEWAY_URL>

예시:
    python scripts/smoke_api.py http://localhost:8000
"""

import json
import sys
from typing import Any, Dict, Optional

import requests

SMOKE_USER_ID = "smoke-user"

SAMPLE_ANSWERS = {
    "wrist_circumference": "medium",
    "shoulder_hip_ratio": "wide",
    "ribcage_depth": "deep",
    "torso_length": "medium",
    "arm_length": "long",
    "femur_length": "long",
    "knee_valgus": "slight",
    "ankle_mobility": "limited",
    "posterior_chain": "average",
    "wrist_mobility": "good",
    "biceps_insertion": "high",
    "calf_insertion": "medium",
    "chest_insertion": "medium",
    "weight_tendency": "balanced",
    "natural_strength": "average",
    "best_responders": "back_shoulders",
}


def _call(method: str, url: str, payload: Optional[Dict[str, Any]] = None, timeout: int = 30) -> Dict[str, Any]:
    try:
        response = requests.request(method, url, json=payload, timeout=timeout)
        return {
            "status_code": response.status_code,
            "success": response.status_code == 200,
            "response": response.json() if response.status_code == 200 else response.text,
            "error": None,
        }
    except requests.RequestException as e:
        return {
            "status_code": None,
            "success": False,
            "response": None,
            "error": str(e),
        }


def check_health(base_url: str) -> Dict[str, Any]:
    """헬스 체크"""
    return _call("GET", f"{base_url}/health", timeout=5)


def submit_morphology(base_url: str) -> Dict[str, Any]:
    """질문지 제출 → 프로필 저장"""
    return _call(
        "POST",
        f"{base_url}/api/v1/morphology/{SMOKE_USER_ID}",
        {"answers": SAMPLE_ANSWERS},
    )


def score_squat(base_url: str) -> Dict[str, Any]:
    """저장된 프로필로 스쿼트 점수"""
    return _call(
        "POST",
        f"{base_url}/api/v1/exercises/barbell_back_squat/score",
        {"userId": SMOKE_USER_ID},
    )


def generate_program(base_url: str) -> Dict[str, Any]:
    """PPL 3일 프로그램 생성"""
    return _call(
        "POST",
        f"{base_url}/api/v1/programs/generate",
        {
            "userId": SMOKE_USER_ID,
            "goal": "hypertrophy",
            "approach": "fix_weaknesses",
            "split": "ppl",
            "daysPerWeek": 3,
        },
        timeout=60,
    )


def save_program(base_url: str, program: Dict[str, Any]) -> Dict[str, Any]:
    """생성된 프로그램을 템플릿으로 저장"""
    return _call(
        "POST",
        f"{base_url}/api/v1/programs/save",
        {"userId": SMOKE_USER_ID, "program": program},
    )


def _print_result(title: str, result: Dict[str, Any]) -> None:
    print(f"\n{title}")
    print("-" * 70)
    print(json.dumps(result, indent=2, ensure_ascii=False))


def main():
    if len(sys.argv) < 2:
        print("사용법: python scripts/smoke_api.py <GATEWAY_URL>")
        print("예시: python scripts/smoke_api.py http://localhost:8000")
        sys.exit(1)

    base_url = sys.argv[1].rstrip("/")

    print("=" * 70)
    print("Gateway API 스모크 테스트")
    print("=" * 70)
    print(f"\n대상 URL: {base_url}")

    health = check_health(base_url)
    _print_result("1. 헬스 체크", health)
    if not health["success"]:
        print("\n⚠️  헬스 체크 실패. URL을 확인하세요.")
        sys.exit(1)

    morphology = submit_morphology(base_url)
    _print_result("2. 모포타입 질문지 제출", morphology)

    score = score_squat(base_url)
    _print_result("3. 스쿼트 점수", score)

    program = generate_program(base_url)
    if program["success"]:
        workouts = program["response"]["workouts"]
        summary = {w["name"]: [e["exerciseName"] for e in w["exercises"]] for w in workouts}
        _print_result("4. 프로그램 생성 (요약)", {"status_code": 200, "workouts": summary})
        saved = save_program(base_url, program["response"])
        _print_result("5. 템플릿 저장", saved)
    else:
        _print_result("4. 프로그램 생성", program)

    results = [health, morphology, score, program]
    passed = sum(1 for r in results if r["success"])
    print("\n" + "=" * 70)
    print(f"결과: {passed}/{len(results)} 성공")
    print("=" * 70)
    sys.exit(0 if passed == len(results) else 1)


if __name__ == "__main__":
    main()
