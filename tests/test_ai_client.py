import httpx

from ai_stub import create_stub_app
from ayora.services.ai_client import NutritionClient


def stub_client():
    return NutritionClient("http://ai.test", transport=httpx.WSGITransport(app=create_stub_app()))


def test_analyze_against_stub_service():
    result = stub_client().analyze("Banana", 2, "piece")
    assert result["calories"] == 178
    assert result["protein"] == 2.2
    assert result["ayurvedic_tag"] == "sweet"


def test_analyze_falls_back_on_connection_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = NutritionClient("http://ai.test", transport=httpx.MockTransport(refuse))
    result = client.analyze("Banana")
    assert result["calories"] == 0
    assert result["ayurvedic_tag"] == "unknown"


def test_analyze_falls_back_on_server_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(503, json={"error": "down"}))
    result = NutritionClient("http://ai.test", transport=transport).analyze("Rice")
    assert result["calories"] == 0


def test_analyze_falls_back_on_bad_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"not json"))
    assert NutritionClient("http://ai.test", transport=transport).analyze("Rice")["calories"] == 0

    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[1, 2, 3]))
    assert NutritionClient("http://ai.test", transport=transport).analyze("Rice")["calories"] == 0


def test_analyze_sends_payload():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = request.read()
        return httpx.Response(200, json={"calories": "120", "protein": None, "ayurvedic_tag": "light"})

    result = NutritionClient("http://ai.test/", transport=httpx.MockTransport(handler)).analyze("Salad", 1.5, "cup")
    assert seen["path"] == "/analyze"
    assert b'"food_name": "Salad"' in seen["body"] or b'"food_name":"Salad"' in seen["body"]
    assert result["calories"] == 120
    assert result["protein"] == 0
    assert result["ayurvedic_tag"] == "light"
