from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class HaulageRules:
    """Driving cadence and cost figures quoted to the model."""

    long_leg_hours: int = 4
    long_leg_km: int = 240
    rest_hours: int = 1
    short_leg_hours: int = 2
    short_leg_km: int = 120
    max_km_per_day: int = 600
    average_speed_kmh: int = 60
    fuel_km_per_litre: float = 2.0
    diesel_price_per_litre: int = 1250
    currency_symbol: str = "₦"
    country: str = "Nigeria"


DEFAULT_RULES = HaulageRules()

JOURNEY_PROMPT_TEMPLATE = """I want you to create a **comprehensive journey management plan** for my haulage firm, where:

* I provide **one origin city** and **multiple destinations** in {country}.
* Each destination should be treated as a **separate trip from the origin** (not continuous).

**Driving & Rest Rules:**

* Drive {long_leg_hours} hours ({long_leg_km} km) → Rest {rest_hours} hour
* Drive {long_leg_hours} hours ({long_leg_km} km) → Rest {rest_hours} hour
* Drive {short_leg_hours} hours ({short_leg_km} km) → Park for the day
* Maximum {max_km_per_day} km per day at an average speed of {average_speed_kmh} km/h
* Fuel consumption: {fuel_km_per_litre:.1f} km/L
* Diesel cost: {currency_symbol}{diesel_price_per_litre:,}/L

**Requirements:**

1. For each destination, plan the route from the origin using actual road distances.
2. Break the journey into **daily segments** according to the driving rules above.
3. At each rest stop and parking point, provide:

    * Town/City name
    * State
    * Distance travelled so far
    * Time of arrival
    * Stop type (Rest or Park)
    * Safety status (Safe / Moderate / Not Safe)
4. Always choose rest and park points in safe and accessible locations, preferably near major towns with fuel stations, lodging, and security presence.
5. If a rest or park point falls in an unsafe area, adjust to the nearest safer town and note the change.

**Output format for each destination:**

**Origin → Destination Name**

| Segment | Drive Time | Distance (km) | Arrival Location | Stop Type | State | Safety   |
| ------- | ---------- | ------------- | ---------------- | --------- | ----- | -------- |
| 1       | {long_leg_hours} hrs      | {first_stop_km:<13} | XYZ Town         | Rest      | State | Safe     |
| 2       | {long_leg_hours} hrs      | {second_stop_km:<13} | ABC City         | Rest      | State | Moderate |
| 3       | {short_leg_hours} hrs      | {max_km_per_day:<13} | DEF Town         | Park      | State | Safe     |

**Trip Summary:**

* Total Distance: X km
* Total Days: X days
* Fuel Required: X litres
* Fuel Cost: {currency_symbol}X

Repeat this separately for each destination given.

---
**Journey Details:**

Origin: {origin}
Destinations:
{destinations}
"""


def build_journey_prompt(origin: str, destinations: str, rules: HaulageRules = DEFAULT_RULES) -> str:
    """Render the planning prompt.

    ``origin`` is trimmed; ``destinations`` is embedded as typed, one city per line.
    """
    return JOURNEY_PROMPT_TEMPLATE.format(
        origin=origin.strip(),
        destinations=destinations,
        first_stop_km=rules.long_leg_km,
        second_stop_km=rules.long_leg_km * 2,
        **asdict(rules),
    )
