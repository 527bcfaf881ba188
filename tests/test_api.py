import hashlib


class TestCreateString:
    def test_create_returns_201_and_record(self, client):
        response = client.post("/strings", json={"value": "Hello World"})
        assert response.status_code == 201
        body = response.json()
        expected_hash = hashlib.sha256(b"Hello World").hexdigest()
        assert body["id"] == expected_hash
        assert body["value"] == "Hello World"
        assert body["properties"]["sha256_hash"] == expected_hash
        assert body["properties"]["length"] == 11
        assert body["properties"]["word_count"] == 2
        assert body["properties"]["unique_characters"] == 8
        assert body["properties"]["character_frequency_map"]["l"] == 3
        assert "created_at" in body

    def test_missing_value_is_400(self, client):
        response = client.post("/strings", json={})
        assert response.status_code == 400
        assert response.json() == {"error": '"value" field is required'}

    def test_non_string_value_is_422(self, client):
        for bad in [123, None, ["a"], {"a": 1}, True]:
            response = client.post("/strings", json={"value": bad})
            assert response.status_code == 422
            assert response.json() == {"error": '"value" must be a string'}

    def test_malformed_body_is_400(self, client):
        response = client.post("/strings", content="not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400

    def test_duplicate_is_409(self, client, store):
        assert client.post("/strings", json={"value": "dup"}).status_code == 201
        response = client.post("/strings", json={"value": "dup"})
        assert response.status_code == 409
        assert response.json() == {"error": "String already exists in the system"}
        assert len(store) == 1

    def test_empty_string_is_accepted(self, client):
        response = client.post("/strings", json={"value": ""})
        assert response.status_code == 201
        assert response.json()["properties"]["is_palindrome"] is True


class TestGetAndDeleteString:
    def test_get_by_original_value(self, client):
        client.post("/strings", json={"value": "find me"})
        response = client.get("/strings/find me")
        assert response.status_code == 200
        assert response.json()["value"] == "find me"

    def test_get_missing_is_404(self, client):
        response = client.get("/strings/nothing")
        assert response.status_code == 404
        assert response.json() == {"error": "String does not exist in the system"}

    def test_get_by_hash_is_404(self, client):
        record = client.post("/strings", json={"value": "abc"}).json()
        assert client.get(f"/strings/{record['id']}").status_code == 404

    def test_delete_then_get_is_404(self, client):
        client.post("/strings", json={"value": "temp"})
        response = client.delete("/strings/temp")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/strings/temp").status_code == 404

    def test_delete_missing_is_404(self, client):
        assert client.delete("/strings/never-added").status_code == 404

    def test_value_with_slash_round_trips(self, client):
        assert client.post("/strings", json={"value": "and/or"}).status_code == 201
        response = client.get("/strings/and%2For")
        assert response.status_code == 200
        assert response.json()["value"] == "and/or"
        assert client.delete("/strings/and/or").status_code == 204
        assert client.get("/strings/and/or").status_code == 404


class TestListStrings:
    def test_no_filters_returns_everything(self, seeded_client):
        body = seeded_client.get("/strings").json()
        assert body["count"] == 6
        assert len(body["data"]) == 6
        assert body["filters_applied"] == {}

    def test_exact_length_window(self, seeded_client):
        body = seeded_client.get("/strings", params={"min_length": 5, "max_length": 5}).json()
        assert sorted(s["value"] for s in body["data"]) == ["hello", "level"]
        assert all(s["properties"]["length"] == 5 for s in body["data"])
        assert body["filters_applied"] == {"min_length": "5", "max_length": "5"}

    def test_palindrome_and_word_count(self, seeded_client):
        body = seeded_client.get("/strings", params={"is_palindrome": "true", "word_count": 1}).json()
        assert sorted(s["value"] for s in body["data"]) == ["level", "racecar"]

    def test_is_palindrome_false(self, seeded_client):
        body = seeded_client.get("/strings", params={"is_palindrome": "false"}).json()
        assert sorted(s["value"] for s in body["data"]) == ["Zebra crossing ahead", "hello", "hello world"]

    def test_contains_character(self, seeded_client):
        body = seeded_client.get("/strings", params={"contains_character": "w"}).json()
        assert [s["value"] for s in body["data"]] == ["hello world"]

    def test_contains_character_is_case_sensitive(self, seeded_client):
        body = seeded_client.get("/strings", params={"contains_character": "Z"}).json()
        assert [s["value"] for s in body["data"]] == ["Zebra crossing ahead"]

    def test_multi_character_contains_is_ignored(self, seeded_client):
        body = seeded_client.get("/strings", params={"contains_character": "zz"}).json()
        assert body["count"] == 6
        assert body["filters_applied"] == {"contains_character": "zz"}

    def test_unparsable_numeric_filter_is_400(self, seeded_client):
        response = seeded_client.get("/strings", params={"min_length": "abc"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid query parameter values"}


class TestNaturalLanguageFilter:
    def test_missing_query_is_400(self, client):
        response = client.get("/strings/filter-by-natural-language")
        assert response.status_code == 400
        assert response.json() == {"error": "Query parameter is required"}

    def test_empty_query_is_400(self, client):
        assert client.get("/strings/filter-by-natural-language", params={"query": ""}).status_code == 400

    def test_single_word_palindromic(self, seeded_client):
        query = "all single word palindromic strings"
        body = seeded_client.get("/strings/filter-by-natural-language", params={"query": query}).json()
        assert sorted(s["value"] for s in body["data"]) == ["level", "racecar"]
        assert body["count"] == 2
        assert body["interpreted_query"] == {
            "original": query,
            "parsed_filters": {"is_palindrome": True, "word_count": 1},
        }

    def test_longer_than_and_letter(self, seeded_client):
        query = "strings longer than 10 that contains the letter z"
        body = seeded_client.get("/strings/filter-by-natural-language", params={"query": query}).json()
        # contains_character is matched against the raw, case-sensitive value
        assert body["count"] == 0
        assert body["interpreted_query"]["parsed_filters"] == {"min_length": 10, "contains_character": "z"}

    def test_unrecognized_query_returns_everything(self, seeded_client):
        body = seeded_client.get("/strings/filter-by-natural-language", params={"query": "surprise me"}).json()
        assert body["count"] == 6
        assert body["interpreted_query"]["parsed_filters"] == {}


class TestServiceEndpoints:
    def test_root(self, client):
        body = client.get("/").json()
        assert body["message"] == "String Analyzer Service"
        assert "POST /strings" in body["endpoints"]

    def test_health_reports_store_size(self, seeded_client):
        body = seeded_client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["total_strings"] == 6

    def test_each_app_has_its_own_store(self, client):
        from fastapi.testclient import TestClient
        from string_analyzer.main import create_app

        client.post("/strings", json={"value": "isolated"})
        other = TestClient(create_app())
        assert other.get("/strings/isolated").status_code == 404

    def test_unknown_route_uses_error_body(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed_uses_error_body(self, client):
        response = client.put("/strings", json={"value": "x"})
        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}
