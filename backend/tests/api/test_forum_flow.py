"""End-to-end flow: free limit, upgrade and notification fan-out."""


def post(client, email, name, title):
    return client.post("/posts", json={"authorEmail": email, "authorName": name, "title": title})


class TestForumFlow:
    def test_limit_upgrade_and_notifications(self, client):
        alice, bob = "alice@example.com", "bob@example.com"

        for i in range(5):
            assert post(client, alice, "Alice", f"Alice {i}").status_code == 201
        assert post(client, alice, "Alice", "Too many").status_code == 403

        client.post("/users", json={"email": bob, "name": "Bob"})
        result = post(client, bob, "Bob", "Bob's first").json()
        assert result["notifiedCount"] == 1

        alice_feed = client.get(f"/notifications/{alice}").json()
        assert alice_feed["unreadCount"] == 1
        assert alice_feed["notifications"][0]["message"] == 'Bob published a new post: "Bob\'s first"'
        # Bob registered after Alice's posts
        assert client.get(f"/notifications/{bob}").json()["notifications"] == []

        session = client.post("/create-checkout-session", json={"email": alice}).json()
        assert session["sessionId"].startswith("cs_test_")
        assert client.put(f"/users/{alice}/upgrade").json()["upgraded"] is True

        assert post(client, alice, "Alice", "Premium post").status_code == 201
        titles = [p["title"] for p in client.get("/posts").json()]
        assert titles[0] == "Premium post"
        assert len(titles) == 7
        assert client.get(f"/notifications/{bob}").json()["unreadCount"] == 1
