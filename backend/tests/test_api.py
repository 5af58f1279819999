# HTTP 레벨 테스트 (TestClient + 프로세스 내부 저장소)
from datetime import timedelta

from blog_api.core.security import create_token
from blog_api.repositories.base import PostQuery


def _register_and_login(client, email="a@x.com", password="pw1", name="Alice"):
    resp = client.post("/register", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 200
    resp = client.post("/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


def test_health(client):
    assert client.get("/").json()["ok"] is True
    assert client.get("/health").json()["status"] == "ok"


def test_register_response_has_no_password(client):
    resp = client.post("/register", json={"name": "Alice", "email": "a@x.com", "password": "pw1"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "email": "a@x.com", "name": "Alice"}


def test_register_duplicate_is_conflict(client):
    body = {"name": "Alice", "email": "a@x.com", "password": "pw1"}
    client.post("/register", json=body)
    resp = client.post("/register", json=body)
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "DUPLICATE_EMAIL"


def test_register_validation_error(client):
    resp = client.post("/register", json={"name": "Alice", "email": "not-an-email", "password": "pw1"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_login_failures_look_the_same(client):
    _register_and_login(client)
    wrong_password = client.post("/login", json={"email": "a@x.com", "password": "nope"})
    unknown_email = client.post("/login", json={"email": "b@x.com", "password": "pw1"})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_me(client):
    headers = _register_and_login(client)
    resp = client.get("/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "email": "a@x.com", "name": "Alice"}


def test_protected_routes_reject_missing_or_bad_token(client, post_repo):
    calls = [
        ("get", "/me", None),
        ("post", "/post", {"title": "T", "content": "C", "authorEmail": "a@x.com"}),
        ("get", "/post", None),
        ("get", "/post/1", None),
        ("put", "/post/1", {"title": "X"}),
        ("put", "/post/publish/1", None),
        ("delete", "/post/1", None),
    ]
    for headers in (None, {"Authorization": "Bearer garbage"}, {"Authorization": "Basic abc"}):
        for method, path, body in calls:
            resp = client.request(method.upper(), path, json=body, headers=headers)
            assert resp.status_code == 401, (method, path, headers)
            assert resp.headers["www-authenticate"] == "Bearer"

    assert post_repo._posts == {}


def test_expired_token_is_rejected(client):
    _register_and_login(client)
    token = create_token({"sub": "1", "email": "a@x.com", "name": "Alice", "type": "access"}, timedelta(seconds=-1))
    resp = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_token_for_missing_user_is_rejected(client):
    token = create_token({"sub": "99", "email": "z@x.com", "name": "Zed", "type": "access"}, timedelta(minutes=5))
    resp = client.get("/post", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_create_draft_unknown_author(client, post_repo):
    import asyncio

    headers = _register_and_login(client)
    resp = client.post("/post", json={"title": "T", "content": "C", "authorEmail": "ghost@x.com"}, headers=headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "AUTHOR_NOT_FOUND"
    assert asyncio.run(post_repo.find(PostQuery())) == []


def test_post_lifecycle_scenario(client):
    headers = _register_and_login(client)

    resp = client.post("/post", json={"title": "T", "content": "C", "authorEmail": "a@x.com"}, headers=headers)
    assert resp.status_code == 200
    post = resp.json()
    assert post == {"id": 1, "title": "T", "content": "C", "published": False, "authorId": 1}

    resp = client.put(f"/post/publish/{post['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["published"] is True

    resp = client.get(f"/post/{post['id']}", headers=headers)
    assert resp.status_code == 200
    body = resp.json()
    assert (body["title"], body["content"], body["published"]) == ("T", "C", True)


def test_update_and_delete(client):
    headers = _register_and_login(client)
    post_id = client.post("/post", json={"title": "T", "content": "C", "authorEmail": "a@x.com"}, headers=headers).json()["id"]

    resp = client.put(f"/post/{post_id}", json={"title": "X"}, headers=headers)
    assert resp.status_code == 200
    assert (resp.json()["title"], resp.json()["content"]) == ("X", "C")

    resp = client.put(f"/post/{post_id}", json={"title": None}, headers=headers)
    assert resp.status_code == 400

    resp = client.delete(f"/post/{post_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == f"Successfully deleted post with id {post_id}"

    resp = client.get(f"/post/{post_id}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "POST_NOT_FOUND"

    assert client.put(f"/post/publish/{post_id}", headers=headers).status_code == 404
    assert client.delete(f"/post/{post_id}", headers=headers).status_code == 404


def test_list_with_search_and_pagination(client):
    headers = _register_and_login(client)
    for title, content in [("foo 1", "a"), ("b", "b foo"), ("c", "c"), ("foo 2", "d")]:
        client.post("/post", json={"title": title, "content": content, "authorEmail": "a@x.com"}, headers=headers)

    resp = client.get("/post", params={"searchString": "foo"}, headers=headers)
    assert [p["id"] for p in resp.json()] == [1, 2, 4]

    resp = client.get("/post", params={"searchString": "foo", "skip": 1, "take": 1}, headers=headers)
    assert [p["id"] for p in resp.json()] == [2]

    resp = client.get("/post", params={"skip": 3}, headers=headers)
    assert [p["id"] for p in resp.json()] == [4]

    assert client.get("/post", params={"take": -1}, headers=headers).status_code == 400


def test_non_numeric_post_id_is_validation_error(client):
    headers = _register_and_login(client)
    assert client.get("/post/abc", headers=headers).status_code == 400


def test_email_case_is_preserved_and_distinct(client):
    first = client.post("/register", json={"name": "Upper", "email": "a@X.com", "password": "pw1"})
    second = client.post("/register", json={"name": "Lower", "email": "a@x.com", "password": "pw2"})
    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["email"] == "a@X.com"
    assert second.json()["email"] == "a@x.com"
    assert first.json()["id"] != second.json()["id"]

    token = client.post("/login", json={"email": "a@X.com", "password": "pw1"}).json()["accessToken"]
    me = client.get("/me", headers={"Authorization": f"Bearer {token}"}).json()
    assert (me["email"], me["name"]) == ("a@X.com", "Upper")
