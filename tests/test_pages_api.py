import logging

from fastapi.testclient import TestClient

from rosterapp.main import app


class TestPageRoutes:
    def test_page_load_renders_list(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["X-Roster-View"] == "list"
        body = response.text
        assert "<h1>Puppy Bowl</h1>" in body
        assert 'id="new-player-form"' in body
        assert body.count('class="player_card"') == 1

    def test_details_then_return(self, client: TestClient):
        client.get("/")
        detail = client.post("/events/main", data={"event": "details:1"})
        assert detail.status_code == 200
        assert detail.headers["X-Roster-View"] == "detail"
        assert "Current Team: Unassigned" in detail.text
        assert "<title>Fido</title>" in detail.text

        back = client.post("/events/main", data={"event": "return"})
        assert back.headers["X-Roster-View"] == "list"
        assert "Current Players" in back.text

    def test_form_submit_adds_player(self, client: TestClient, fake_remote):
        client.get("/")
        response = client.post("/events/form", data={
            "playerName": "Biscuit",
            "playerBreed": "Beagle",
            "playerStatus": "bench",
            "playerImage": "b.png",
            "playerTeam": "",
        })
        assert response.status_code == 200
        assert response.text.count('class="player_card"') == 2
        assert fake_remote.players[-1]["teamId"] is None

    def test_remove_event(self, client: TestClient):
        client.get("/")
        response = client.post("/events/main", data={"event": "remove:1"})
        assert "The player list is empty" in response.text

    def test_malformed_event_serves_page_unchanged(self, client: TestClient):
        before = client.get("/").text
        response = client.post("/events/main", data={"event": "nonsense!"})
        assert response.status_code == 200
        assert response.text == before

    def test_view_header_is_logged(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="rosterapp.middleware.view_log"):
            client.get("/")
        assert "[VIEW] GET / -> list" in caplog.text


class TestServiceRoutes:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["ok"] is True

    def test_debug_state_after_load(self, client: TestClient):
        client.get("/")
        client.post("/events/main", data={"event": "details:1"})
        data = client.get("/debug/state").json()
        assert data["view"] == "detail"
        assert [p["name"] for p in data["players"]] == ["Fido"]
        assert data["selected_player"]["id"] == 1
        assert data["selected_player"]["teamId"] is None

    def test_debug_player(self, client: TestClient):
        response = client.get("/debug/players/1")
        assert response.status_code == 200
        assert response.json()["imageUrl"] == "x.png"

    def test_debug_player_missing(self, client: TestClient):
        response = client.get("/debug/players/99")
        assert response.status_code == 404

    def test_debug_player_rejects_non_positive_id(self, client: TestClient):
        assert client.get("/debug/players/0").status_code == 422


def test_app_owns_a_single_page_context():
    assert app.state.roster is not None
