"""
Tests for trip and membership endpoints.
"""

def test_create_trip_adds_creator(client, alice, trip):
    assert trip["name"] == "Goa"
    assert trip["country"] == "India"
    assert trip["budget"] == 1000
    assert not isinstance(trip["budget"], str)
    assert trip["members"] == ["alice", "bob", "carol"]


def test_create_trip_deduplicates_members(client, alice):
    response = client.post(
        "/api/trips",
        json={"name": "Solo", "member_usernames": ["alice", "bob", "bob", " "]},
        headers=alice,
    )
    assert response.status_code == 201
    assert response.json()["members"] == ["alice", "bob"]


def test_create_trip_without_members(client, alice):
    response = client.post("/api/trips", json={"name": "Weekend"}, headers=alice)

    assert response.status_code == 201
    assert response.json()["members"] == ["alice"]
    assert response.json()["budget"] is None


def test_create_trip_negative_budget(client, alice):
    response = client.post("/api/trips", json={"name": "Bad", "budget": -5}, headers=alice)
    assert response.status_code == 422


def test_list_trips_only_shows_memberships(client, login, trip):
    bob = login("bob")
    dave = login("dave")

    assert [t["id"] for t in client.get("/api/trips", headers=bob).json()] == [trip["id"]]
    assert client.get("/api/trips", headers=dave).json() == []


def test_get_trip_access(client, login, trip):
    dave = login("dave")

    assert client.get(f"/api/trips/{trip['id']}", headers=login("bob")).status_code == 200
    assert client.get(f"/api/trips/{trip['id']}", headers=dave).status_code == 403
    assert client.get("/api/trips/999", headers=dave).status_code == 404


def test_add_member(client, alice, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/add-member", json={"username": "dave"}, headers=alice
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Member added"
    assert response.json()["trip"]["members"] == ["alice", "bob", "carol", "dave"]


def test_add_existing_member(client, alice, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/add-member", json={"username": "bob"}, headers=alice
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Already a member"


def test_remove_member_deletes_their_expenses(client, alice, trip):
    trip_id = trip["id"]
    client.post(
        f"/api/trips/{trip_id}/expenses",
        json={"amount": 60, "paid_by_username": "bob", "description": "Taxi"},
        headers=alice,
    )
    client.post(
        f"/api/trips/{trip_id}/expenses",
        json={"amount": 30, "paid_by_username": "alice", "description": "Snacks"},
        headers=alice,
    )

    response = client.post(
        f"/api/trips/{trip_id}/remove-member", json={"username": "bob"}, headers=alice
    )

    assert response.status_code == 200
    assert response.json()["trip"]["members"] == ["alice", "carol"]
    expenses = client.get(f"/api/trips/{trip_id}/expenses", headers=alice).json()
    assert [e["paid_by"] for e in expenses] == ["alice"]


def test_remove_unknown_member(client, alice, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/remove-member", json={"username": "zed"}, headers=alice
    )
    assert response.status_code == 404


def test_cannot_remove_creator(client, login, trip):
    bob = login("bob")

    response = client.post(
        f"/api/trips/{trip['id']}/remove-member", json={"username": "alice"}, headers=bob
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "The trip creator cannot be removed"
    members = client.get(f"/api/trips/{trip['id']}", headers=bob).json()["members"]
    assert members == ["alice", "bob", "carol"]


def test_cannot_remove_last_member(client, alice):
    trip = client.post("/api/trips", json={"name": "Solo"}, headers=alice).json()

    response = client.post(
        f"/api/trips/{trip['id']}/remove-member", json={"username": "alice"}, headers=alice
    )

    assert response.status_code == 409
    assert client.get(f"/api/trips/{trip['id']}", headers=alice).json()["members"] == ["alice"]


def test_delete_trip(client, alice, trip):
    trip_id = trip["id"]
    client.post(
        f"/api/trips/{trip_id}/expenses",
        json={"amount": 10, "paid_by_username": "alice", "description": "Tea"},
        headers=alice,
    )

    response = client.delete(f"/api/trips/{trip_id}", headers=alice)

    assert response.status_code == 200
    assert client.get(f"/api/trips/{trip_id}", headers=alice).status_code == 404
    assert client.get("/api/trips", headers=alice).json() == []


def test_summary_with_budget(client, alice, trip):
    trip_id = trip["id"]
    client.post(
        f"/api/trips/{trip_id}/expenses",
        json={"amount": 300, "paid_by_username": "alice", "description": "Hotel"},
        headers=alice,
    )
    client.post(
        f"/api/trips/{trip_id}/expenses",
        json={"amount": 150, "paid_by_username": "bob", "description": "Dinner"},
        headers=alice,
    )

    summary = client.get(f"/api/trips/{trip_id}/summary", headers=alice).json()

    assert summary["currency_code"] == "INR"
    assert summary["currency_symbol"] == "₹"
    assert summary["total"] == 450
    assert summary["member_count"] == 3
    assert summary["average_per_member"] == 150
    assert summary["budget"] == 1000
    assert summary["budget_percentage"] == 45.0
    assert summary["budget_remaining"] == 550
    assert summary["is_over_budget"] is False


def test_summary_over_budget(client, alice):
    trip = client.post(
        "/api/trips", json={"name": "Paris", "country": "France", "budget": 100}, headers=alice
    ).json()
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"amount": 150, "paid_by_username": "alice", "description": "Museum"},
        headers=alice,
    )

    summary = client.get(f"/api/trips/{trip['id']}/summary", headers=alice).json()

    assert summary["currency_symbol"] == "€"
    assert summary["is_over_budget"] is True
    assert summary["budget_percentage"] == 150.0
    assert summary["budget_remaining"] == -50


def test_summary_without_budget(client, alice):
    trip = client.post("/api/trips", json={"name": "Road trip", "country": "Narnia"}, headers=alice).json()

    summary = client.get(f"/api/trips/{trip['id']}/summary", headers=alice).json()

    assert summary["currency_code"] == "USD"
    assert summary["currency_symbol"] == "$"
    assert summary["total"] == 0
    assert summary["budget"] is None
    assert summary["budget_percentage"] is None
    assert summary["is_over_budget"] is False
