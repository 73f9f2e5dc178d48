def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_signup_then_login(client, signup):
    created = signup()

    res = client.post("/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert res.status_code == 200
    body = res.json()
    assert body["user"]["id"] == created["user"]["id"]
    assert body["user"] == {"id": created["user"]["id"], "username": "ann", "email": "a@x.com"}


def test_signup_errors(client, signup):
    res = client.post("/auth/signup", json={"username": "a", "email": "a@x.com", "password": "secret1"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Username must be at least 2 characters"

    signup()
    res = client.post("/auth/signup", json={"username": "ann2", "email": "A@X.COM", "password": "secret1"})
    assert res.status_code == 409


def test_login_errors_are_identical(client, signup):
    signup()
    wrong = client.post("/auth/login", json={"email": "a@x.com", "password": "wrong12"})
    missing = client.post("/auth/login", json={"email": "zz@x.com", "password": "secret1"})

    assert wrong.status_code == missing.status_code == 401
    assert wrong.json() == missing.json() == {"detail": "Invalid credentials"}


def test_session_user_and_touch(client, signup):
    token = signup()["sessionToken"]

    res = client.get("/auth/session", headers=_bearer(token))
    assert res.json()["user"]["username"] == "ann"
    assert client.get("/auth/session").json() == {"user": None}
    assert client.get("/auth/session", headers=_bearer("nope")).json() == {"user": None}

    assert client.post("/auth/session/touch", headers=_bearer(token)).json() == {"ok": True}
    assert client.post("/auth/session/touch", headers=_bearer("nope")).json() == {"ok": False}


def test_submit_and_boards(client, signup):
    token = signup()["sessionToken"]

    assert client.post("/scores", json={"score": 10}, headers=_bearer(token)).json() == {"success": True}
    assert client.post("/scores", json={"score": 99}, headers=_bearer(token)).status_code == 200

    daily = client.get("/leaderboard/daily").json()
    assert daily["period"] == "daily"
    assert [e["score"] for e in daily["entries"]] == [99, 10]
    assert daily["entries"][0]["username"] == "ann"

    high = client.get("/leaderboard/high-score").json()
    assert high == {"highScore": {"username": "ann", "score": 99}}

    players = client.get("/leaderboard/players/current").json()["players"]
    assert players == [{"username": "ann", "score": 99, "activeAt": players[0]["activeAt"]}]


def test_submit_errors(client, signup):
    token = signup()["sessionToken"]

    assert client.post("/scores", json={"score": -1}, headers=_bearer(token)).status_code == 400
    assert client.post("/scores", json={"score": "ten"}, headers=_bearer(token)).status_code == 400
    huge = client.post("/scores", json={"score": 10 ** 400}, headers=_bearer(token))
    assert huge.status_code == 400
    assert huge.json() == {"detail": "Invalid score"}
    res = client.post("/scores", json={"score": 5})
    assert res.status_code == 401
    assert res.json() == {"detail": "Invalid session"}


def test_bad_period(client):
    res = client.get("/leaderboard/monthly")
    assert res.status_code == 400


def test_empty_boards(client):
    assert client.get("/leaderboard/high-score").json() == {"highScore": None}
    assert client.get("/leaderboard/players/current").json() == {"players": []}
    assert client.get("/leaderboard/alltime").json()["entries"] == []
