"""
AI Nutrition Client

HTTP client for the nutrition analysis microservice (see ``ai_stub``).
"""

import logging
from typing import Any, Dict, Optional

import httpx
from flask import current_app

from ayora.services.nutrition_lookup import NUTRIENT_KEYS, empty_nutrition

logger = logging.getLogger(__name__)


class NutritionClient:
    """Calls ``POST {base_url}/analyze`` and never raises to the caller."""

    def __init__(self, base_url: str, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    def analyze(self, food_name: str, quantity: float = 1, unit: str = "serving") -> Dict[str, Any]:
        payload = {
            "food_name": food_name,
            "quantity": float(quantity if quantity is not None else 1),
            "unit": unit or "serving",
        }
        try:
            with self._client() as client:
                response = client.post("/analyze", json=payload)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"AI service call failed, using fallback nutrition: {e}")
            return empty_nutrition()

        if not isinstance(data, dict):
            logger.warning(f"AI service returned unexpected body: {data!r}")
            return empty_nutrition()

        result: Dict[str, Any] = {}
        for key in NUTRIENT_KEYS:
            try:
                result[key] = float(data.get(key) or 0)
            except (TypeError, ValueError):
                result[key] = 0.0
        result["ayurvedic_tag"] = data.get("ayurvedic_tag") or "unknown"
        return result


def get_nutrition_client() -> NutritionClient:
    return current_app.extensions["nutrition_client"]


def init_nutrition_client(app, transport: Optional[httpx.BaseTransport] = None) -> NutritionClient:
    client = NutritionClient(
        app.config["AI_SERVICE_URL"],
        timeout=app.config.get("AI_SERVICE_TIMEOUT", 5.0),
        transport=transport,
    )
    app.extensions["nutrition_client"] = client
    return client
