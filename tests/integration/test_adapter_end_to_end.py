"""Adapter driven against the real app through Starlette's TestClient."""

import json

import pytest

from tripdesk.client.adapter import TripsApiClient
from tripdesk.client.state import LoggedIn
from tripdesk.data.seed import USER_DIRECTORY

pytestmark = pytest.mark.testclient


@pytest.mark.parametrize("user_name", sorted(USER_DIRECTORY))
def test_login_then_listings_only_return_own_customer(adapter, user_name):
    session_id = adapter.login(user_name)
    assert not session_id.startswith("Login failed")

    customer = USER_DIRECTORY[user_name]
    for result in (adapter.get_trips(), adapter.get_vehicles(), adapter.get_drivers()):
        rows = json.loads(result)
        assert rows
        assert {row["customerName"] for row in rows} == {customer}


def test_pepsi_trips_scenario(adapter, client):
    session_id = adapter.login("user_pepsi")

    resp = client.get("/trips", headers={"SessionId": session_id})
    assert resp.status_code == 200
    assert resp.json() == [
        {
            "id": 1,
            "origin": "Sao Paulo",
            "destination": "Rio de Janeiro",
            "driverId": 1,
            "vehicleId": 1,
            "informedCargoValue": 1000.0,
            "customerName": "Pepsi",
        }
    ]
    assert json.loads(adapter.get_trips()) == resp.json()


def test_unknown_session_scenario(adapter, client):
    assert client.get("/vehicles", headers={"SessionId": "not-a-real-id"}).status_code == 401

    adapter.state = LoggedIn("not-a-real-id")
    assert adapter.get_vehicles() == "GetVehicles failed: Session is unauthorized or invalid."


def test_unknown_user_scenario(adapter, app):
    result = adapter.login("unknown_user")

    assert "Login failed" in result
    assert "403" in result
    assert adapter.session_id is None
    assert len(app.state.session_store) == 0


def test_listing_before_login_never_reaches_the_server(adapter, app):
    assert adapter.get_trips() == "GetTrips failed: Session is unauthorized or invalid."
    assert adapter.get_vehicles() == "GetVehicles failed: Session is unauthorized or invalid."
    assert adapter.get_drivers() == "GetDrivers failed: Session is unauthorized or invalid."
    assert len(app.state.session_store) == 0


def test_two_adapters_hold_independent_sessions(api_http, app):
    pepsi = TripsApiClient("http://testserver", http=api_http)
    fanta = TripsApiClient("http://testserver", http=api_http)

    first = pepsi.login("user_pepsi")
    second = fanta.login("user_fanta")

    assert first != second
    assert app.state.session_store.resolve(first) == "Pepsi"
    assert app.state.session_store.resolve(second) == "Fanta"
    assert json.loads(pepsi.get_trips())[0]["id"] == 1
    assert json.loads(fanta.get_trips())[0]["id"] == 3


def test_relogin_switches_customer(adapter):
    adapter.login("user_pepsi")
    adapter.login("user_cocacola")

    assert [row["id"] for row in json.loads(adapter.get_vehicles())] == [2, 5]


def test_repeated_reads_are_identical(adapter):
    adapter.login("user_fanta")

    assert adapter.get_drivers() == adapter.get_drivers()


def test_empty_user_name_reaches_server_as_bad_request(adapter):
    result = adapter.login("")

    assert result.startswith("Login failed: API returned status code 400 - ")
    assert adapter.session_id is None


def test_adapter_calls_raise_no_timeout_warnings(adapter, recwarn):
    adapter.login("user_pepsi")
    adapter.get_trips()
    adapter.get_vehicles()
    adapter.get_drivers()

    assert [str(w.message) for w in recwarn if "timeout" in str(w.message).lower()] == []
