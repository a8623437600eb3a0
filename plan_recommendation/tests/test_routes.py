import pytest
from fastapi.testclient import TestClient

from main import app
from plan_recommendation.logic import EligibilityGate, EngineConfig, RecommendationEngine
from plan_recommendation.routes import get_engine

BEGINNER_STRENGTH = {
    "fitness_level": "beginner",
    "training_experience_months": 2,
    "available_training_days": 3,
    "primary_goal": "strength",
}


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_recommendations_use_builtin_catalog(client):
    response = client.post("/recommendations", json={"profile": BEGINNER_STRENGTH, "limit": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["summary"]["total_evaluated"] == 8
    assert body["summary"]["total_recommended"] == 1
    best = body["recommendations"][0]
    assert best["template"]["id"] == "1"
    assert best["rank"] == 1
    assert best["tier"] == "optimal"
    assert best["total_score"] == pytest.approx(97.5)
    assert body["summary"]["tier_counts"]["optimal"] == 1
    assert set(best["dimension_scores"]) == {
        "fitness_level", "goal", "schedule", "eligibility", "volume"
    }


def test_recommendations_with_custom_catalog(client, mock_templates):
    templates = [t.model_dump(mode="json") for t in mock_templates[3:]]
    response = client.post(
        "/recommendations",
        json={"profile": BEGINNER_STRENGTH, "templates": templates, "limit": 5},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["recommendations"] == []
    assert body["summary"]["total_evaluated"] == 5
    assert body["warnings"]


def test_empty_catalog_is_not_an_error(client):
    response = client.post(
        "/recommendations", json={"profile": BEGINNER_STRENGTH, "templates": [], "limit": 5}
    )
    assert response.status_code == 200
    assert response.json()["recommendations"] == []


def test_soft_gate_engine_override(client):
    app.dependency_overrides[get_engine] = lambda: RecommendationEngine(
        EngineConfig(eligibility_gate=EligibilityGate.SOFT)
    )
    response = client.post("/recommendations", json={"profile": BEGINNER_STRENGTH, "limit": 8})
    assert response.status_code == 200
    assert len(response.json()["recommendations"]) == 8


@pytest.mark.parametrize("payload", [
    {"profile": {**BEGINNER_STRENGTH, "fitness_level": "elite"}},
    {"profile": BEGINNER_STRENGTH, "limit": 0},
    {"profile": BEGINNER_STRENGTH, "templates": [{"id": "broken"}]},
])
def test_invalid_requests_return_400(client, payload):
    response = client.post("/recommendations", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"]


def test_non_integer_limit_fails_request_validation(client):
    response = client.post("/recommendations", json={"profile": BEGINNER_STRENGTH, "limit": "many"})
    assert response.status_code == 422


def test_limit_is_typed_in_openapi_schema(client):
    schema = client.get("/openapi.json").json()
    limit = schema["components"]["schemas"]["RecommendationRequest"]["properties"]["limit"]
    assert limit["type"] == "integer"


def test_score_single_template(client, mock_templates):
    response = client.post(
        "/recommendations/score",
        json={
            "profile": BEGINNER_STRENGTH,
            "template": mock_templates[7].model_dump(mode="json"),
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["is_eligible"] is False
    assert body["completeness"] == "incomplete"


def test_list_templates(client):
    response = client.get("/recommendations/templates")
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [str(i) for i in range(1, 9)]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/recommendations/health").json()["status"] == "ok"
