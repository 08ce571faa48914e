from unittest.mock import MagicMock, patch

import pytest
import requests

from planner_ui.client import PlannerRequestError, fetch_journeys


def _response(body) -> MagicMock:
    resp = MagicMock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = body
    return resp


def _journey() -> dict:
    return {
        "origin": "Lagos",
        "destination": "Kano",
        "summary": {"totalDistance": "1,050 km", "totalDays": "2", "fuelRequired": "525 L", "fuelCost": "₦656,250"},
        "segments": [
            {
                "segment": 1,
                "driveTime": "4 hrs",
                "distance": 240,
                "arrivalLocation": "Ibadan",
                "stopType": "Rest",
                "state": "Oyo",
                "safety": "Safe",
            }
        ],
    }


def test_fetch_journeys_posts_once_and_builds_cards():
    with patch("planner_ui.client.requests.post", return_value=_response({"journeys": [_journey()]})) as post:
        cards = fetch_journeys("Lagos", "Kano")

    post.assert_called_once()
    assert post.call_args.args[0].endswith("/journeys")
    assert post.call_args.kwargs["json"] == {"origin": "Lagos", "destinations": "Kano"}
    assert cards[0].title == "Lagos → Kano"
    assert len(cards[0].rows) == 1


def test_backend_error_status_is_wrapped():
    resp = _response({})
    resp.raise_for_status.side_effect = requests.HTTPError("502 Bad Gateway")

    with patch("planner_ui.client.requests.post", return_value=resp):
        with pytest.raises(PlannerRequestError):
            fetch_journeys("Lagos", "Kano")


def test_connection_error_is_wrapped():
    with patch("planner_ui.client.requests.post", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(PlannerRequestError):
            fetch_journeys("Lagos", "Kano")


@pytest.mark.parametrize("body", [{"plans": []}, {"journeys": [{"origin": "Lagos"}]}, {"journeys": None}])
def test_unexpected_payload_is_wrapped(body):
    with patch("planner_ui.client.requests.post", return_value=_response(body)):
        with pytest.raises(PlannerRequestError):
            fetch_journeys("Lagos", "Kano")


def test_invalid_json_body_is_wrapped():
    resp = _response(None)
    resp.json.side_effect = requests.JSONDecodeError("Expecting value", "oops", 0)

    with patch("planner_ui.client.requests.post", return_value=resp):
        with pytest.raises(PlannerRequestError):
            fetch_journeys("Lagos", "Kano")
