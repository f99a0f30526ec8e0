import base64
import os

from fastapi.testclient import TestClient

BASE = "/api/v1/basic"


def _payload(title="Dune", pages=412, name="Frank Herbert", bio="Sci-fi author", **extra):
    body = {
        "title": title,
        "numberOfPage": pages,
        "author": {"name": name, "biography": bio},
    }
    body.update(extra)
    return body


def _save(client, **kwargs):
    resp = client.post(f"{BASE}/save", json=_payload(**kwargs))
    assert resp.status_code == 200
    return resp.json()["data"]


def test_save_returns_success_envelope(client):
    resp = client.post(f"{BASE}/save", json=_payload())

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["message"] == "Operation successful"
    data = body["data"]
    assert isinstance(data["id"], int)
    assert data["title"] == "Dune"
    assert data["numberOfPage"] == 412
    assert data["author"]["name"] == "Frank Herbert"
    assert data["author"]["biography"] == "Sci-fi author"
    assert isinstance(data["author"]["id"], int)


def test_save_ignores_unknown_fields(client):
    resp = client.post(f"{BASE}/save", json=_payload(isbn="123", publisher={"name": "Chilton"}))

    assert resp.status_code == 200
    assert "isbn" not in resp.json()["data"]


def test_save_without_author_is_400_envelope(client):
    resp = client.post(f"{BASE}/save", json={"title": "No author"})

    assert resp.status_code == 400
    body = resp.json()
    assert body == {"status": "error", "message": "Author is required", "data": None}
    assert client.get(BASE).json()["data"] == []


def test_save_with_bad_page_type_is_400_envelope(client):
    resp = client.post(f"{BASE}/save", json=_payload(pages="many"))

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "error"
    assert "numberOfPage" in body["message"]
    assert body["data"] is None


def test_find_all(client):
    assert client.get(BASE).json()["data"] == []

    _save(client, title="A")
    _save(client, title="B")

    resp = client.get(BASE)
    assert resp.status_code == 200
    assert sorted(b["title"] for b in resp.json()["data"]) == ["A", "B"]


def test_find_by_param_and_path(client):
    created = _save(client)

    by_param = client.get(f"{BASE}/by-param", params={"id": created["id"]})
    by_path = client.get(f"{BASE}/by-path/{created['id']}")

    assert by_param.status_code == 200
    assert by_path.status_code == 200
    assert by_param.json()["data"] == created
    assert by_path.json()["data"] == created


def test_find_unknown_is_404_envelope(client):
    resp = client.get(f"{BASE}/by-path/999")

    assert resp.status_code == 404
    assert resp.json() == {
        "status": "error",
        "message": "Book with ID 999 not found",
        "data": None,
    }
    assert client.get(f"{BASE}/by-param", params={"id": 999}).status_code == 404


def test_non_integer_id_is_400(client):
    resp = client.get(f"{BASE}/by-path/abc")

    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


def test_missing_query_id_is_400(client):
    resp = client.get(f"{BASE}/by-param")

    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


def test_update_replaces_fields_and_author(client):
    created = _save(client)

    resp = client.put(
        f"{BASE}/update/{created['id']}",
        json=_payload(title="Children of Dune", pages=444, name="Brian Herbert", bio="Son"),
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == created["id"]
    assert data["title"] == "Children of Dune"
    assert data["numberOfPage"] == 444
    assert data["author"]["name"] == "Brian Herbert"
    assert data["author"]["id"] != created["author"]["id"]

    fetched = client.get(f"{BASE}/by-path/{created['id']}").json()["data"]
    assert fetched == data


def test_update_unknown_is_404(client):
    resp = client.put(f"{BASE}/update/77", json=_payload())

    assert resp.status_code == 404
    assert resp.json()["status"] == "error"
    assert client.get(BASE).json()["data"] == []


def test_delete_then_get_is_terminal(client):
    created = _save(client)

    resp = client.delete(f"{BASE}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "Operation successful", "data": True}

    assert client.get(f"{BASE}/by-path/{created['id']}").status_code == 404
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404


def test_upload_returns_base64_and_writes_file(client, test_settings):
    content = b"\x89PNG fake image bytes"

    resp = client.post(
        f"{BASE}/upload",
        files={"file": ("ignored.png", content, "application/octet-stream")},
        data={"fileName": "x.txt"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert base64.b64decode(body["data"]) == content
    with open(f"{test_settings.FILE_UPLOAD_DIRECTORY}/x.txt", "rb") as f:
        assert f.read() == content


def test_upload_without_file_is_400(client, test_settings):
    resp = client.post(f"{BASE}/upload", data={"fileName": "x.txt"})

    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": "Bad Request", "data": None}
    assert os.listdir(test_settings.FILE_UPLOAD_DIRECTORY) == []


def test_upload_without_name_is_400(client):
    resp = client.post(f"{BASE}/upload", files={"file": ("a.txt", b"abc", "text/plain")})

    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


def test_upload_path_traversal_is_400(client, tmp_path):
    resp = client.post(
        f"{BASE}/upload",
        files={"file": ("a.txt", b"abc", "text/plain")},
        data={"fileName": "../outside.txt"},
    )

    assert resp.status_code == 400
    assert not (tmp_path / "outside.txt").exists()


def test_unhandled_error_renders_500_envelope(test_settings, monkeypatch):
    from api.main import create_app

    app = create_app(test_settings)

    def boom():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(app.state.book_service, "list_all", boom)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        resp = test_client.get(BASE)

    assert resp.status_code == 500
    assert resp.json() == {"status": "error", "message": "store exploded", "data": None}


def test_unknown_route_keeps_envelope(client):
    resp = client.get("/api/v1/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["status"] == "error"


def test_health_endpoints(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json() == {"status": "healthy"}


def test_oversized_id_is_404_on_every_route(client):
    huge = 2**64

    assert client.get(f"{BASE}/by-path/{huge}").status_code == 404
    assert client.get(f"{BASE}/by-param", params={"id": huge}).status_code == 404
    assert client.put(f"{BASE}/update/{huge}", json=_payload()).status_code == 404
    resp = client.delete(f"{BASE}/{huge}")
    assert resp.status_code == 404
    assert resp.json() == {
        "status": "error",
        "message": f"Book with ID {huge} not found",
        "data": None,
    }
