"""Stand-in for the nutrition analysis AI service."""

import logging

from flask import Flask, jsonify, request

from ayora.services.nutrition_lookup import analyze

logger = logging.getLogger(__name__)


def create_stub_app():
    app = Flask(__name__)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.post("/analyze")
    def analyze_food():
        data = request.get_json(force=True, silent=True) or {}
        food_name = str(data.get("food_name") or "").strip()
        if not food_name:
            return jsonify({"error": {"code": "VALIDATION_ERROR", "message": "food_name is required"}}), 400

        try:
            quantity = float(data.get("quantity", 1))
        except (TypeError, ValueError):
            return jsonify({"error": {"code": "VALIDATION_ERROR", "message": "quantity must be a number"}}), 400
        unit = str(data.get("unit") or "serving")

        result = analyze(food_name, quantity, unit)
        logger.info(f"Analyzed '{food_name}' ({quantity} {unit}): {result['calories']} kcal")
        return jsonify(result)

    return app
