import pytest
from fastapi.testclient import TestClient

from configs import Settings, get_settings
from src.analysis import AnalysisBackendError, ImageAnalysisResponse
from src.api.main import app
from src.api.routes.analysis import get_analysis_client


class FakeAnalysisClient:

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.images = []

    async def analyze_image(self, image_base64):
        self.images.append(image_base64)
        if self.error:
            raise self.error
        return ImageAnalysisResponse.model_validate(self.payload)


@pytest.fixture
def api_client():
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def english(api_client):
    app.dependency_overrides[get_settings] = lambda: Settings(display_language="en")
    return api_client


class TestServiceEndpoints:

    def test_health_check(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_endpoint(self, api_client):
        data = api_client.get("/").json()

        assert "search" in data["endpoints"]
        assert "analyze" in data["endpoints"]

    def test_request_id_is_echoed(self, api_client):
        response = api_client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_is_generated(self, api_client):
        response = api_client.get("/health")
        assert response.headers["X-Request-ID"]


class TestSearchEndpoint:

    def test_single_match(self, api_client):
        response = api_client.get("/enumbers/search", params={"q": "e120"})

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "single"
        assert data["display_code"] == "120"
        assert data["message"] is None
        match = data["matches"][0]
        assert match["status"] == "non-vegan"
        assert match["display"]["color_token"] == "error"
        assert match["display"]["label"] == "Ej veganskt"
        assert match["advisory"] is None

    def test_uncertain_carries_advisory(self, api_client):
        match = api_client.get("/enumbers/search", params={"q": "471"}).json()["matches"][0]

        assert match["status"] == "uncertain"
        assert match["display"]["color"] == "#FF9800"
        assert "tillverkaren" in match["advisory"]

    def test_multiple_matches(self, api_client):
        data = api_client.get("/enumbers/search", params={"q": "472"}).json()

        assert data["kind"] == "multiple"
        assert data["display_code"] is None
        assert [m["code"] for m in data["matches"]][:2] == ["E472a", "E472b"]
        assert data["message"]

    def test_not_found(self, api_client):
        data = api_client.get("/enumbers/search", params={"q": "9999"}).json()

        assert data["kind"] == "none"
        assert data["reason"] == "not_found"
        assert "E-nummer" in data["message"]
        assert data["matches"] == []

    def test_malformed_query_is_not_an_error(self, api_client):
        response = api_client.get("/enumbers/search", params={"q": "abc"})

        assert response.status_code == 200
        assert response.json()["reason"] == "malformed"

    def test_empty_query(self, api_client):
        data = api_client.get("/enumbers/search").json()

        assert data["reason"] == "empty_query"
        assert data["message"] == "Ange ett E-nummer att söka efter."

    def test_english_labels(self, english):
        data = english.get("/enumbers/search", params={"q": "100"}).json()

        assert data["matches"][0]["display"]["label"] == "Vegan"

    def test_overlong_query_is_malformed(self, api_client):
        response = api_client.get("/enumbers/search", params={"q": "1" * 100})

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "none"
        assert data["reason"] == "malformed"
        assert "E-nummer" in data["message"]
        assert data["matches"] == []


class TestSelectEndpoint:

    def test_select_exact_code(self, api_client):
        response = api_client.get("/enumbers/E101")

        assert response.status_code == 200
        assert response.json()["code"] == "E101"

    def test_select_lettered_code(self, api_client):
        assert api_client.get("/enumbers/e472B").json()["code"] == "E472b"

    def test_unknown_code(self, english):
        response = english.get("/enumbers/E999z")

        assert response.status_code == 404
        assert "could not find" in response.json()["detail"]

    def test_stats(self, api_client):
        data = api_client.get("/enumbers/stats").json()

        assert data["total"] == sum(data["segments"].values())
        assert list(data["segments"])[0] == "non_vegan"


class TestAnnotateEndpoint:

    def test_annotate(self, api_client, sample_ingredients):
        response = api_client.post(
            "/ingredients/annotate",
            json={"ingredients": sample_ingredients},
        )

        assert response.status_code == 200
        data = response.json()
        assert [item["status"] for item in data["items"]][2:5] == [
            "uncertain", "non-vegan", "vegan"
        ]
        assert data["counts"]["unknown"] == 3

    def test_watched_ingredients(self, api_client):
        response = api_client.post(
            "/ingredients/annotate",
            json={
                "ingredients": ["helmjölkspulver"],
                "watched": [{"name": "mjölk", "status": "non-vegan"}],
            },
        )

        assert response.json()["items"][0]["status"] == "non-vegan"

    def test_empty_list_is_rejected(self, api_client):
        response = api_client.post("/ingredients/annotate", json={"ingredients": []})
        assert response.status_code == 422

    def test_too_many_ingredients(self, api_client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_ingredients=2)

        response = api_client.post(
            "/ingredients/annotate",
            json={"ingredients": ["a", "b", "c"]},
        )

        assert response.status_code == 400


class TestAnalyzeEndpoint:

    def test_analyze(self, api_client, backend_payload):
        fake = FakeAnalysisClient(payload=backend_payload)
        app.dependency_overrides[get_analysis_client] = lambda: fake

        response = api_client.post("/analyze", json={"image": "aGVsbG8="})

        assert response.status_code == 200
        data = response.json()
        assert fake.images == ["aGVsbG8="]
        assert data["analysis"]["is_vegan"] is False
        assert len(data["ingredients"]) == 5
        assert data["counts"]["non-vegan"] == 1

    def test_backend_failure(self, api_client):
        fake = FakeAnalysisClient(error=AnalysisBackendError("Analysis failed", status_code=500))
        app.dependency_overrides[get_analysis_client] = lambda: fake

        response = api_client.post("/analyze", json={"image": "aGVsbG8="})

        assert response.status_code == 502
        assert response.json()["detail"] == "Analysis failed"

    def test_missing_image(self, api_client):
        response = api_client.post("/analyze", json={"image": ""})
        assert response.status_code == 422
