from fastapi.testclient import TestClient

from bookshelf.config import settings
from bookshelf.main import app


client = TestClient(app)


def _ids():
    return [b["id"] for b in client.get("/books").json()]


def test_health_check():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_books_returns_seed_collection():
    resp = client.get("/books")
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "title": "The Hobbit", "author": "J.R.R. Tolkien"},
        {"id": 2, "title": "1984", "author": "George Orwell"},
    ]


def test_create_returns_201_and_appears_in_list():
    resp = client.post("/books", json={"title": "Dune", "author": "Frank Herbert"})
    assert resp.status_code == 201
    created = resp.json()
    assert created["title"] == "Dune"
    assert created["author"] == "Frank Herbert"
    assert isinstance(created["id"], int)

    listed = client.get("/books").json()
    assert listed[-1] == created


def test_create_accepts_empty_fields():
    resp = client.post("/books", json={"title": "", "author": ""})
    assert resp.status_code == 201
    assert resp.json()["title"] == ""


def test_create_with_missing_field_is_rejected_by_framework():
    resp = client.post("/books", json={"title": "No author"})
    assert resp.status_code == 422
    assert _ids() == [1, 2]


def test_update_existing_book():
    resp = client.put("/books/2", json={"title": "Animal Farm", "author": "George Orwell"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "title": "Animal Farm", "author": "George Orwell"}

    listed = client.get("/books").json()
    assert listed[1] == {"id": 2, "title": "Animal Farm", "author": "George Orwell"}


def test_update_missing_book_returns_404_message():
    before = client.get("/books").json()

    resp = client.put("/books/999", json={"title": "x", "author": "y"})

    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}
    assert client.get("/books").json() == before


def test_delete_existing_book():
    resp = client.delete("/books/1")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Book deleted"}
    assert 1 not in _ids()


def test_delete_missing_book_still_succeeds():
    resp = client.delete("/books/424242")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Book deleted"}
    assert _ids() == [1, 2]


def test_non_integer_id_is_rejected_by_framework():
    resp = client.put("/books/abc", json={"title": "x", "author": "y"})
    assert resp.status_code == 422
    assert client.delete("/books/abc").status_code == 422
    assert _ids() == [1, 2]


def test_static_frontend_is_served():
    resp = client.get("/ui/")
    assert resp.status_code == 200
    assert "Books Manager" in resp.text


def test_cors_headers_present_for_browser_clients():
    resp = client.get("/books", headers={"Origin": "http://localhost:5173"})
    assert resp.headers.get("access-control-allow-origin") == "*"


def test_startup_without_seed_starts_empty(monkeypatch):
    monkeypatch.setattr(settings, "seed_books", False)
    with TestClient(app) as started:
        assert started.get("/books").json() == []


def test_startup_with_seed_restores_sample_books(monkeypatch):
    monkeypatch.setattr(settings, "seed_books", True)
    client.delete("/books/1")
    with TestClient(app) as started:
        assert [b["id"] for b in started.get("/books").json()] == [1, 2]


def test_static_frontend_cancels_previous_toast_timer():
    page = client.get("/ui/").text
    assert "clearTimeout(toastTimer)" in page
    assert page.index("clearTimeout(toastTimer)") < page.index("toastTimer = setTimeout")
