from haulage_planner.llm.prompts import HaulageRules, build_journey_prompt


def test_prompt_embeds_rules_and_inputs():
    prompt = build_journey_prompt("  Lagos ", "Kano\nAbuja\nPort Harcourt")

    assert "Drive 4 hours (240 km) → Rest 1 hour" in prompt
    assert "Drive 2 hours (120 km) → Park for the day" in prompt
    assert "Maximum 600 km per day at an average speed of 60 km/h" in prompt
    assert "Fuel consumption: 2.0 km/L" in prompt
    assert "Diesel cost: ₦1,250/L" in prompt
    assert "separate trip from the origin" in prompt
    assert "| Segment | Drive Time | Distance (km) |" in prompt
    assert "Origin: Lagos\n" in prompt
    assert prompt.rstrip().endswith("Destinations:\nKano\nAbuja\nPort Harcourt")


def test_prompt_is_deterministic():
    assert build_journey_prompt("Lagos", "Kano") == build_journey_prompt("Lagos", "Kano")


def test_prompt_follows_custom_rules():
    rules = HaulageRules(diesel_price_per_litre=1400, fuel_km_per_litre=2.5)
    prompt = build_journey_prompt("Lagos", "Kano", rules=rules)

    assert "Diesel cost: ₦1,400/L" in prompt
    assert "Fuel consumption: 2.5 km/L" in prompt
