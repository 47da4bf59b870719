"""Gateway API 테스트 (FastAPI TestClient)"""

import pytest
from fastapi.testclient import TestClient

import gateway.main as gateway_main
from gateway.services import OrchestrationService
from shared.stores import JsonExerciseCatalog

ANSWERS = {
    "arm_length": "long",
    "femur_length": "long",
    "ankle_mobility": "limited",
    "wrist_mobility": "good",
}


@pytest.fixture
def service():
    return OrchestrationService(catalog=JsonExerciseCatalog())


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(gateway_main, "orchestration_service", service)
    with TestClient(gateway_main.app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_questions(client):
    response = client.get("/api/v1/morphology/questions")

    assert response.status_code == 200
    questions = response.json()
    assert len(questions) == 16
    assert questions[0]["questionKey"] == "wrist_circumference"


class TestMorphology:

    def test_missing_profile_is_404(self, client):
        response = client.get("/api/v1/morphology/nobody")

        assert response.status_code == 404
        assert response.json()["detail"]["type"] == "KeyError"

    def test_submit_then_get(self, client):
        submitted = client.post("/api/v1/morphology/u-1", json={"answers": ANSWERS})

        assert submitted.status_code == 200
        body = submitted.json()
        assert body["userId"] == "u-1"
        assert body["globalType"] == "longiligne"
        assert body["mobility"]["ankleDorsiflexion"] == "limited"

        fetched = client.get("/api/v1/morphology/u-1")
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_retake_overwrites(self, client):
        client.post("/api/v1/morphology/u-1", json={"answers": ANSWERS})
        client.post("/api/v1/morphology/u-1", json={"answers": {"femur_length": "short"}})

        body = client.get("/api/v1/morphology/u-1").json()

        assert body["proportions"]["femurLength"] == "short"
        assert body["proportions"]["armLength"] == "medium"
        assert body["mobility"]["ankleDorsiflexion"] == "average"

    def test_submit_includes_lift_analysis(self, client):
        body = client.post("/api/v1/morphology/u-1", json={"answers": ANSWERS}).json()

        assert set(body["liftAnalysis"]) == {"squat", "deadlift", "bench", "curls"}
        assert body["liftAnalysis"]["squat"]["score"] < 50
        assert "Box squat" in body["liftAnalysis"]["squat"]["variants"]
        assert body["liftAnalysis"]["bench"]["variants"][0] == "Floor press"


class TestScore:

    def test_unknown_exercise_is_404(self, client):
        response = client.post("/api/v1/exercises/moon_press/score", json={})

        assert response.status_code == 404

    def test_no_profile_is_neutral(self, client):
        response = client.post("/api/v1/exercises/barbell_back_squat/score", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 50
        assert body["band"]["key"] == "neutral"
        assert body["cues"][0] == "Brace before you descend"
        assert body["recommendationSource"] == "curated"

    def test_inline_profile(self, client):
        response = client.post(
            "/api/v1/exercises/barbell_back_squat/score",
            json={"profile": {"mobility": {"ankleDorsiflexion": "limited"}}},
        )

        body = response.json()
        assert body["score"] == 35
        assert "Elevate heels (plates or lifting shoes)" in body["modifications"]
        assert body["badge"] == "🟠 Use caution (35/100)"

    def test_stored_profile_by_user_id(self, client):
        client.post("/api/v1/morphology/u-1", json={"answers": ANSWERS})

        response = client.post("/api/v1/exercises/front_squat/score", json={"userId": "u-1"})

        body = response.json()
        assert body["recommendationSource"] == "category_default"
        assert body["score"] < 50
        assert body["disadvantages"]


class TestPrograms:

    def test_days_below_split_minimum_is_400(self, client):
        response = client.post(
            "/api/v1/programs/generate",
            json={"goal": "strength", "split": "bro_split", "daysPerWeek": 3},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["type"] == "ValueError"

    def test_invalid_goal_is_422(self, client):
        response = client.post(
            "/api/v1/programs/generate",
            json={"goal": "bulking", "split": "ppl", "daysPerWeek": 3},
        )

        assert response.status_code == 422

    def test_malformed_inline_profile_still_generates(self, client):
        # 1e400은 JSON 파싱 시 무한대
        response = client.post(
            "/api/v1/programs/generate",
            content=(
                '{"goal": "strength", "split": "full_body", "daysPerWeek": 2,'
                ' "profile": {"mobilityWork": 5, "scores": {"ecto": 1e400}}}'
            ),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert len(response.json()["workouts"]) == 2

    def test_generate_and_save(self, client, service):
        client.post("/api/v1/morphology/u-1", json={"answers": ANSWERS})

        generated = client.post(
            "/api/v1/programs/generate",
            json={"userId": "u-1", "goal": "hypertrophy", "approach": "fix_weaknesses", "split": "ppl", "daysPerWeek": 3},
        )

        assert generated.status_code == 200
        program = generated.json()
        assert program["config"]["split"] == "push_pull_legs"
        assert [w["name"] for w in program["workouts"]] == ["Push", "Pull", "Legs"]

        saved = client.post("/api/v1/programs/save", json={"userId": "u-1", "program": program})

        assert saved.status_code == 200
        template_ids = saved.json()["templateIds"]
        assert len(template_ids) == 3
        assert len(service.template_store.list_for_user("u-1")) == 3
