"""Tests for the /books endpoints."""

import pytest
from fastapi.testclient import TestClient


class TestListBooks:
    def test_returns_seeded_catalog(self, client: TestClient):
        response = client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert len(books) == 6
        for book in books:
            assert book["id"] is not None
            assert book["title"].strip()
            assert book["author"].strip()
            assert book["genre"].strip()
        titles = {book["title"] for book in books}
        assert "The Kotlin Programming Language" in titles
        assert "Clean Code" in titles

    def test_json_shape(self, client: TestClient):
        book = client.get("/books").json()[1]

        assert book == {
            "id": 2,
            "title": "Clean Code",
            "author": "Robert C. Martin",
            "genre": "Programming",
            "isbn": "978-0132350884",
            "publishedYear": 2008,
        }

    def test_filter_by_genre(self, client: TestClient):
        response = client.get("/books", params={"genre": "programming"})

        assert response.status_code == 200
        assert {book["genre"] for book in response.json()} == {"Programming"}
        assert len(response.json()) == 3

    def test_filter_by_unknown_genre(self, client: TestClient):
        response = client.get("/books", params={"genre": "DoesNotExist"})

        assert response.status_code == 200
        assert response.json() == []

    def test_request_id_header(self, client: TestClient):
        response = client.get("/books", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestCreateBook:
    def test_creates_book(self, client: TestClient):
        payload = {
            "title": "Integration Test Book",
            "author": "Test Author",
            "genre": "Testing",
            "isbn": "978-1234567890",
            "publishedYear": 2024,
        }

        response = client.post("/books", json=payload)

        assert response.status_code == 201
        saved = response.json()
        assert saved["id"] is not None
        assert saved == {"id": saved["id"], **payload}
        assert saved in client.get("/books").json()

    def test_minimal_book(self, client: TestClient):
        response = client.post("/books", json={"title": "A", "author": "B", "genre": "C"})

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["isbn"] is None
        assert body["publishedYear"] is None

    def test_ids_are_distinct(self, client: TestClient):
        ids = [
            client.post(
                "/books", json={"title": f"Book {i}", "author": "B", "genre": "C"}
            ).json()["id"]
            for i in range(10)
        ]

        assert len(set(ids)) == 10
        existing = {book["id"] for book in client.get("/books").json()}
        assert set(ids) <= existing

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "author": "B", "genre": "C"},
            {"title": "A", "author": "  ", "genre": "C"},
            {"title": "A", "author": "B", "genre": ""},
        ],
    )
    def test_blank_field_rejected(self, client: TestClient, payload):
        response = client.post("/books", json=payload)

        assert response.status_code == 400
        assert response.content == b""
        assert len(client.get("/books").json()) == 6

    def test_missing_field_rejected(self, client: TestClient):
        response = client.post("/books", json={"title": "A", "author": "B"})

        assert response.status_code == 400

    def test_malformed_json_rejected(self, client: TestClient):
        response = client.post(
            "/books",
            content=b'{"title": "A", ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_wrong_type_rejected(self, client: TestClient):
        response = client.post(
            "/books",
            json={"title": "A", "author": "B", "genre": "C", "publishedYear": "soon"},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize("book_id", [0, -5])
    def test_non_positive_id_rejected(self, client: TestClient, book_id: int):
        response = client.post(
            "/books", json={"id": book_id, "title": "A", "author": "B", "genre": "C"}
        )

        assert response.status_code == 400
        assert response.content == b""
        assert all(book["id"] > 0 for book in client.get("/books").json())

    def test_explicit_id_is_kept(self, client: TestClient):
        response = client.post(
            "/books", json={"id": 40, "title": "A", "author": "B", "genre": "C"}
        )

        assert response.status_code == 201
        assert response.json()["id"] == 40


class TestRecommendation:
    def test_recommendation_for_genre(self, client: TestClient):
        response = client.get("/books/recommendation", params={"genre": "Programming"})

        assert response.status_code == 200
        book = response.json()
        assert book["id"] is not None
        assert book["genre"] == "Programming"

    def test_recommendation_without_genre(self, client: TestClient):
        response = client.get("/books/recommendation")

        assert response.status_code == 200
        all_ids = {book["id"] for book in client.get("/books").json()}
        assert response.json()["id"] in all_ids

    def test_blank_genre_means_any(self, client: TestClient):
        response = client.get("/books/recommendation", params={"genre": ""})

        assert response.status_code == 200

    def test_unknown_genre(self, client: TestClient):
        response = client.get("/books/recommendation", params={"genre": "DoesNotExist"})

        assert response.status_code == 404

    def test_recommends_new_genre(self, client: TestClient):
        client.post("/books", json={"title": "Dune", "author": "Frank Herbert", "genre": "SciFi"})

        response = client.get("/books/recommendation", params={"genre": "scifi"})

        assert response.status_code == 200
        assert response.json()["title"] == "Dune"


class TestGetBook:
    def test_get_by_id(self, client: TestClient):
        response = client.get("/books/4")

        assert response.status_code == 200
        assert response.json()["title"] == "1984"

    def test_not_found(self, client: TestClient):
        assert client.get("/books/999").status_code == 404

    def test_invalid_id(self, client: TestClient):
        assert client.get("/books/not-a-number").status_code == 400


class TestDatabaseBackend:
    """The same endpoints over the SQL repository."""

    def test_list_seeded(self, db_client: TestClient):
        response = db_client.get("/books")

        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_create_and_fetch(self, db_client: TestClient):
        response = db_client.post(
            "/books", json={"title": "A", "author": "B", "genre": "C"}
        )

        assert response.status_code == 201
        book_id = response.json()["id"]
        assert book_id == 7
        assert db_client.get(f"/books/{book_id}").json()["title"] == "A"
        assert len(db_client.get("/books").json()) == 7

    def test_blank_field_rejected(self, db_client: TestClient):
        response = db_client.post(
            "/books", json={"title": "", "author": "B", "genre": "C"}
        )

        assert response.status_code == 400

    def test_recommendation(self, db_client: TestClient):
        ok = db_client.get("/books/recommendation", params={"genre": "fantasy"})
        missing = db_client.get("/books/recommendation", params={"genre": "DoesNotExist"})

        assert ok.status_code == 200
        assert ok.json()["title"] == "The Lord of the Rings"
        assert missing.status_code == 404

    def test_genre_beyond_ascii(self, db_client: TestClient):
        created = db_client.post(
            "/books", json={"title": "Émile", "author": "Rousseau", "genre": "éducation"}
        )

        response = db_client.get("/books/recommendation", params={"genre": "Éducation"})
        listed = db_client.get("/books", params={"genre": "ÉDUCATION"})

        assert created.status_code == 201
        assert response.status_code == 200
        assert response.json()["title"] == "Émile"
        assert [book["title"] for book in listed.json()] == ["Émile"]
