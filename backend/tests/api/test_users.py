"""Tests for user endpoints."""


class TestRegisterUser:
    def test_first_registration_returns_201(self, client):
        response = client.post(
            "/users",
            json={"email": "alice@example.com", "name": "Alice", "image": "https://img/a.png"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "alice@example.com"
        assert data["membership"] == "free"
        assert "createdAt" in data

    def test_repeat_registration_returns_200(self, client):
        client.post("/users", json={"email": "alice@example.com", "name": "Alice"})

        response = client.post("/users", json={"email": "alice@example.com", "name": "Other"})

        assert response.status_code == 200
        assert response.json()["name"] == "Alice"

    def test_invalid_email(self, client):
        response = client.post("/users", json={"email": "nope"})
        assert response.status_code == 422


class TestGetUser:
    def test_get_user(self, client):
        client.post("/users", json={"email": "alice@example.com", "name": "Alice"})

        response = client.get("/users/alice@example.com")

        assert response.status_code == 200
        assert response.json()["name"] == "Alice"

    def test_get_unknown_user(self, client):
        response = client.get("/users/ghost@example.com")

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"


class TestUpgradeUser:
    def test_upgrade(self, client):
        client.post("/users", json={"email": "alice@example.com"})

        response = client.put("/users/alice@example.com/upgrade")

        assert response.status_code == 200
        assert response.json() == {"message": "User upgraded to premium", "upgraded": True}
        assert client.get("/users/alice@example.com").json()["membership"] == "premium"

    def test_upgrade_unknown_user_is_noop(self, client):
        response = client.put("/users/ghost@example.com/upgrade")

        assert response.status_code == 200
        assert response.json() == {"message": "No user to upgrade", "upgraded": False}
        assert client.get("/users/ghost@example.com").status_code == 404


class TestMixedCaseEmail:
    def test_register_upgrade_and_feed_with_typed_email(self, client):
        """The address as typed by the user reaches the same record everywhere."""
        typed = "Alice@Example.COM"

        created = client.post("/users", json={"email": typed, "name": "Alice"})
        assert created.status_code == 201
        assert created.json()["email"] == "alice@example.com"

        response = client.put(f"/users/{typed}/upgrade")
        assert response.json() == {"message": "User upgraded to premium", "upgraded": True}
        assert client.get(f"/users/{typed}").json()["membership"] == "premium"

        for i in range(6):
            response = client.post("/posts", json={"authorEmail": typed, "title": f"Post {i}"})
            assert response.status_code == 201

        client.post("/posts", json={"authorEmail": "bob@example.com", "title": "Hi Alice"})
        feed = client.get(f"/notifications/{typed}").json()
        assert feed["unreadCount"] == 1
        assert client.put(f"/notifications/{typed}/read").json()["updated"] == 1

    def test_repeat_registration_with_other_casing(self, client):
        client.post("/users", json={"email": "alice@example.com", "name": "Alice"})

        response = client.post("/users", json={"email": "ALICE@example.com", "name": "Other"})

        assert response.status_code == 200
        assert response.json()["name"] == "Alice"
