from app.data.nineties import NINETIES_DATA


def test_welcome_returns_all_content(client):
    response = client.get("/api/90s")

    assert response.status_code == 200
    body = response.json()
    assert body["message"].startswith("Welcome to the 90s")
    assert "timestamp" in body
    assert len(body["data"]["movies"]) == 5
    assert len(body["data"]["music"]) == 5
    assert len(body["data"]["trends"]) == 8


def test_content_lists(client):
    movies = client.get("/api/90s/movies").json()
    music = client.get("/api/90s/music").json()
    trends = client.get("/api/90s/trends").json()

    assert movies[0] == {"title": "Pulp Fiction", "year": 1994, "genre": "Crime"}
    assert {"artist": "Oasis", "song": "Wonderwall", "year": 1995} in music
    assert trends == NINETIES_DATA.trends


def test_random_pick_draws_from_static_lists(client):
    movies = [m.model_dump() for m in NINETIES_DATA.movies]
    songs = [s.model_dump() for s in NINETIES_DATA.music]

    for _ in range(20):
        pick = client.get("/api/90s/random").json()
        assert set(pick) == {"movie", "song", "trend"}
        assert pick["movie"] in movies
        assert pick["song"] in songs
        assert pick["trend"] in NINETIES_DATA.trends


def test_static_content_served_without_database(offline_client):
    assert offline_client.get("/api/90s/movies").status_code == 200
    assert offline_client.get("/api/90s/random").status_code == 200


def test_health_reports_database_state(client, offline_client):
    online = client.get("/health").json()
    offline = offline_client.get("/health").json()

    assert online["status"] == "OK"
    assert online["mongodb"] == "connected"
    assert offline["status"] == "OK"
    assert offline["mongodb"] == "disconnected"


def test_health_timestamp_is_utc(client):
    timestamp = client.get("/health").json()["timestamp"]

    assert timestamp.endswith(("Z", "+00:00"))
