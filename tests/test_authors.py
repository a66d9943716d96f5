"""
Tests for Authors API Endpoints

Tests for /authors endpoints.
"""

from fastapi import status

from bookstore_api.models import Author, Book


class TestListAuthors:
    """Tests for GET /authors endpoint."""

    def test_list_authors_empty(self, client):
        """Test listing authors when database is empty."""
        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors_with_data(self, client, sample_author, second_author):
        """Test listing authors returns them in insertion order."""
        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [a["name"] for a in data] == ["Jane Austen", "George Orwell"]
        assert data[0] == {
            "id": sample_author.id,
            "name": "Jane Austen",
            "bio": "English novelist known for her social commentary.",
            "birthdate": "1775-12-16",
        }


class TestGetAuthor:
    """Tests for GET /authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        """Test getting an author by ID."""
        response = client.get(f"/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_author.id
        assert data["name"] == "Jane Austen"
        assert data["birthdate"] == "1775-12-16"

    def test_get_author_not_found(self, client):
        """Test getting a non-existent author returns 404."""
        response = client.get("/authors/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_get_author_non_numeric_id(self, client, sample_author):
        """Test that a non-numeric ID is treated as no match."""
        response = client.get("/authors/abc")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_get_author_out_of_range_id(self, client):
        """Test that an ID beyond the key range is treated as no match."""
        response = client.get("/authors/99999999999999999999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreateAuthor:
    """Tests for POST /authors endpoint."""

    def test_create_author_minimal(self, client):
        """Test creating an author with only required fields."""
        author_data = {"name": "Jane Austen", "birthdate": "1775-12-16"}

        response = client.post("/authors", json=author_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Jane Austen"
        assert data["bio"] is None
        assert data["birthdate"] == "1775-12-16"

    def test_create_then_get_returns_same_record(self, client):
        """Test that a created author reads back unchanged."""
        author_data = {
            "name": "Ernest Hemingway",
            "bio": "American novelist and journalist.",
            "birthdate": "1899-07-21",
        }

        created = client.post("/authors", json=author_data).json()
        fetched = client.get(f"/authors/{created['id']}").json()

        assert fetched == created
        assert fetched == {"id": created["id"], **author_data}

    def test_create_author_trims_name(self, client):
        """Test that surrounding whitespace is removed from the name."""
        response = client.post(
            "/authors",
            json={"name": "  Mary Shelley  ", "birthdate": "1797-08-30"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "Mary Shelley"

    def test_create_author_accepts_iso_datetime(self, client):
        """Test that an ISO-8601 datetime keeps only its date part."""
        response = client.post(
            "/authors",
            json={"name": "Mary Shelley", "birthdate": "1797-08-30T00:00:00Z"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["birthdate"] == "1797-08-30"

    def test_create_author_empty_name(self, client):
        """Test that a blank name is rejected with a field message."""
        response = client.post(
            "/authors",
            json={"name": "   ", "birthdate": "1775-12-16"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "errors": [
                {"field": "name", "message": "Name is required", "location": "body"},
            ]
        }

    def test_create_author_missing_fields(self, client):
        """Test that every missing required field is reported."""
        response = client.post("/authors", json={"bio": "No name"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        messages = {e["field"]: e["message"] for e in response.json()["errors"]}
        assert messages == {
            "name": "Name is required",
            "birthdate": "Birthdate must be a valid date",
        }

    def test_create_author_invalid_birthdate(self, client):
        """Test that a non-ISO birthdate is rejected."""
        for birthdate in ["16/12/1775", "1775-13-01", "not a date", 17751216]:
            response = client.post(
                "/authors",
                json={"name": "Jane Austen", "birthdate": birthdate},
            )

            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json()["errors"][0]["message"] == "Birthdate must be a valid date"

    def test_create_author_malformed_json(self, client):
        """Test that a body that is not JSON is rejected with 400."""
        response = client.post(
            "/authors",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "errors": [
                {"field": "body", "message": "JSON decode error", "location": "body"},
            ]
        }

    def test_create_author_does_not_persist_invalid(self, client, db_session):
        """Test that a rejected body writes nothing."""
        client.post("/authors", json={"name": ""})

        assert db_session.query(Author).count() == 0


class TestUpdateAuthor:
    """Tests for PUT /authors/{author_id} endpoint."""

    def test_update_author_full_replace(self, client, sample_author):
        """Test replacing every field of an author."""
        update_data = {
            "name": "Jane Austen (1775-1817)",
            "bio": "Author of six major novels.",
            "birthdate": "1775-12-17",
        }

        response = client.put(f"/authors/{sample_author.id}", json=update_data)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": sample_author.id, **update_data}

    def test_update_author_omitted_bio_is_cleared(self, client, sample_author):
        """Test that PUT replaces the whole record, bio included."""
        response = client.put(
            f"/authors/{sample_author.id}",
            json={"name": "Jane Austen", "birthdate": "1775-12-16"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["bio"] is None

    def test_update_author_requires_all_fields(self, client, sample_author):
        """Test that a partial body is rejected."""
        response = client.put(
            f"/authors/{sample_author.id}",
            json={"name": "Only A Name"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "birthdate"

    def test_update_author_not_found(self, client):
        """Test updating a non-existent author returns 404."""
        response = client.put(
            "/authors/99999",
            json={"name": "Updated", "birthdate": "1900-01-01"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_update_author_invalid_body_checked_first(self, client):
        """Test that body validation runs before the lookup."""
        response = client.put("/authors/99999", json={"name": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteAuthor:
    """Tests for DELETE /authors/{author_id} endpoint."""

    def test_delete_author_success(self, client, sample_author):
        """Test deleting an author without books."""
        response = client.delete(f"/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        get_response = client.get(f"/authors/{sample_author.id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_with_books_is_refused(self, client, db_session, sample_author, sample_book):
        """Test that an author with books cannot be deleted."""
        response = client.delete(f"/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Cannot delete author with associated books"}

        # Author and books are unchanged
        author = client.get(f"/authors/{sample_author.id}").json()
        assert author["name"] == "Jane Austen"
        assert db_session.query(Book).filter_by(author_id=sample_author.id).count() == 1

    def test_delete_author_not_found(self, client):
        """Test deleting a non-existent author returns 404."""
        response = client.delete("/authors/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_delete_author_non_numeric_id(self, client):
        """Test deleting with a non-numeric ID returns 404."""
        response = client.delete("/authors/not-an-id")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestGetAuthorBooks:
    """Tests for GET /authors/{author_id}/books endpoint."""

    def test_get_author_books(self, client, sample_author, library):
        """Test that only the author's books are returned, in insertion order."""
        response = client.get(f"/authors/{sample_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["author"]["id"] == sample_author.id
        assert data["author"]["name"] == "Jane Austen"
        assert [b["title"] for b in data["books"]] == ["Sense and Sensibility", "Emma"]
        assert all(b["author_id"] == sample_author.id for b in data["books"])

    def test_get_author_books_empty(self, client, second_author):
        """Test an author without books."""
        response = client.get(f"/authors/{second_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["books"] == []

    def test_get_author_books_not_found(self, client):
        """Test a missing author returns 404."""
        response = client.get("/authors/99999/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}
