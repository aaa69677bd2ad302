import pytest

from ayora.services.nutrition_lookup import analyze, lookup, to_grams, empty_nutrition, NUTRIENT_KEYS


def test_lookup_matches_substring_in_declaration_order():
    assert lookup("Grilled Chicken Salad")[0] == "chicken"
    assert lookup("fried RICE")[0] == "rice"
    assert lookup("Egg fried rice")[0] == "rice"


def test_lookup_unknown_food_uses_default():
    key, facts = lookup("mystery stew")
    assert key == "default"
    assert facts["calories"] == 100
    assert lookup("")[0] == "default"


@pytest.mark.parametrize("quantity, unit, grams", [
    (150, "grams", 150),
    (250, "ml", 250),
    (2, "oz", 56.7),
    (1, "serving", 100),
    (3, "piece", 300),
    (0.5, "bowl", 50),
])
def test_to_grams(quantity, unit, grams):
    assert to_grams(quantity, unit) == pytest.approx(grams)


def test_analyze_scales_per_100_grams():
    result = analyze("chicken breast", 200, "grams")
    assert result["calories"] == 330
    assert result["protein"] == 62
    assert result["fat"] == 7.2
    assert result["sodium"] == 148
    assert result["ayurvedic_tag"] == "protein"


def test_analyze_rounds_values():
    result = analyze("apple", 1, "oz")
    # 28.35 g of apple
    assert result["calories"] == 15
    assert isinstance(result["calories"], int)
    assert result["carbohydrates"] == 4.0
    assert result["sodium"] == 0


def test_analyze_default_profile_for_unknown_food():
    result = analyze("unknown thing", 2, "serving")
    assert result["calories"] == 200
    assert result["ayurvedic_tag"] == "unknown"


def test_empty_nutrition():
    result = empty_nutrition()
    assert all(result[k] == 0 for k in NUTRIENT_KEYS)
    assert result["ayurvedic_tag"] == "unknown"
