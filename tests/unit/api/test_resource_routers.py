import pytest

from tripdesk.api.main import create_app
from tripdesk.api.sessions import SessionStore
from tripdesk.data.seed import Catalog
from tripdesk.models import Trip

pytestmark = pytest.mark.testclient


def _login(client, user_name):
    return client.post("/simple_login", json={"userName": user_name}).json()["sessionId"]


def test_trips_for_pepsi_session(client):
    session_id = _login(client, "user_pepsi")

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


@pytest.mark.parametrize(
    "user_name, customer, vehicle_ids, driver_ids",
    [
        ("user_pepsi", "Pepsi", [1, 4], [1, 4]),
        ("user_cocacola", "Coca Cola", [2, 5], [2, 5]),
        ("user_fanta", "Fanta", [3, 6], [3, 6]),
    ],
)
def test_listings_are_partitioned_by_customer(client, user_name, customer, vehicle_ids, driver_ids):
    headers = {"SessionId": _login(client, user_name)}

    vehicles = client.get("/vehicles", headers=headers).json()
    drivers = client.get("/drivers", headers=headers).json()
    trips = client.get("/trips", headers=headers).json()

    assert [row["id"] for row in vehicles] == vehicle_ids
    assert [row["id"] for row in drivers] == driver_ids
    assert len(trips) == 1
    assert {row["customerName"] for row in vehicles + drivers + trips} == {customer}


def test_driver_and_vehicle_field_names(client):
    headers = {"SessionId": _login(client, "user_cocacola")}

    driver = client.get("/drivers", headers=headers).json()[0]
    vehicle = client.get("/vehicles", headers=headers).json()[0]

    assert set(driver) == {"id", "firstName", "lastName", "age", "rating", "customerName"}
    assert set(vehicle) == {"id", "licensePlate", "brand", "model", "year", "customerName"}


@pytest.mark.parametrize("path", ["/trips", "/vehicles", "/drivers"])
@pytest.mark.parametrize("headers", [{}, {"SessionId": ""}, {"SessionId": "not-a-real-id"}])
def test_listings_reject_missing_or_unknown_session(client, path, headers):
    resp = client.get(path, headers=headers)

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Session is unauthorized or invalid."


def test_reads_are_repeatable(client):
    headers = {"SessionId": _login(client, "user_fanta")}

    first = client.get("/drivers", headers=headers)
    second = client.get("/drivers", headers=headers)

    assert first.json() == second.json()


def test_sessions_are_scoped_to_their_app():
    from fastapi.testclient import TestClient

    with TestClient(create_app()) as one, TestClient(create_app()) as two:
        session_id = _login(one, "user_pepsi")
        assert two.get("/trips", headers={"SessionId": session_id}).status_code == 401


def test_custom_catalog_and_store_are_used():
    from fastapi.testclient import TestClient

    store = SessionStore()
    session_id = store.issue("Acme")
    catalog = Catalog(
        directory={"user_acme": "Acme"},
        trips=(
            Trip(id=7, origin="A", destination="B", driverId=1, vehicleId=1, informedCargoValue=1.5, customerName="Acme"),
            Trip(id=8, origin="C", destination="D", driverId=1, vehicleId=1, informedCargoValue=2.5, customerName="acme"),
        ),
    )

    with TestClient(create_app(catalog=catalog, session_store=store)) as client:
        resp = client.get("/trips", headers={"SessionId": session_id})
        assert [row["id"] for row in resp.json()] == [7]
        assert client.post("/simple_login", json={"userName": "user_pepsi"}).status_code == 403
