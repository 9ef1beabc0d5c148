import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from quickex.app import create_app
from quickex.config import Settings
from quickex.store import SupabaseStore


def make_settings(**overrides) -> Settings:
    values = {
        "network": "testnet",
        "supabase_url": "https://test-project.supabase.co",
        "supabase_anon_key": "test-anon-key-for-testing",
        "port": 4000,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class BackendApiTests(unittest.TestCase):
    def setUp(self):
        with patch("quickex.store.create_client"):
            self.store = SupabaseStore.from_settings(make_settings())
        self.client = TestClient(create_app(settings=make_settings(), store=self.store))

    def test_health_returns_ok(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_health_is_stable_across_requests(self):
        self.client.post("/username", json={"username": "alice_123"})
        self.client.post("/username", json={"username": "A"})
        for _ in range(3):
            response = self.client.get("/health")
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json(), {"status": "ok"})

    def test_username_accepts_valid_payload(self):
        response = self.client.post("/username", json={"username": "alice_123"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"ok": True})

    def test_username_accepts_length_bounds(self):
        for username in ("abc", "a" * 32, "___", "007", "snake_case_name"):
            with self.subTest(username=username):
                response = self.client.post("/username", json={"username": username})
                self.assertEqual(response.status_code, 201)
                self.assertEqual(response.json(), {"ok": True})

    def test_username_rejects_invalid_values(self):
        for username in ("A", "", "ab", "a" * 33, "alice@example", "Alice", "al ice", "al-ice"):
            with self.subTest(username=username):
                response = self.client.post("/username", json={"username": username})
                self.assertEqual(response.status_code, 400)

    def test_username_rejects_unexpected_field(self):
        response = self.client.post(
            "/username", json={"username": "alice_123", "extra": "x"}
        )
        self.assertEqual(response.status_code, 400)
        payload = response.json()
        self.assertEqual(payload["statusCode"], 400)
        self.assertEqual(payload["error"], "Bad Request")
        self.assertTrue(any("extra" in message for message in payload["message"]))

    def test_username_rejects_missing_or_non_string(self):
        for body in ({}, {"username": None}, {"username": 12345}, {"username": True}):
            with self.subTest(body=body):
                response = self.client.post("/username", json=body)
                self.assertEqual(response.status_code, 400)

    def test_username_rejects_non_object_body(self):
        for body in (["alice_123"], "alice_123", 42):
            with self.subTest(body=body):
                response = self.client.post("/username", json=body)
                self.assertEqual(response.status_code, 400)

    def test_username_rejects_malformed_json(self):
        response = self.client.post(
            "/username",
            content=b'{"username": ',
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], ["Request body must be valid JSON"])

    def test_username_rejects_empty_body(self):
        response = self.client.post("/username")
        self.assertEqual(response.status_code, 400)

    def test_charset_error_message(self):
        response = self.client.post("/username", json={"username": "bad@name"})
        self.assertEqual(response.status_code, 400)
        messages = " ".join(response.json()["message"])
        self.assertIn("lowercase letters, numbers, and underscores", messages)

    def test_openapi_documents_both_routes(self):
        response = self.client.get("/openapi.json")
        self.assertEqual(response.status_code, 200)
        schema = response.json()
        self.assertEqual(schema["info"]["title"], "QuickEx Backend")
        self.assertIn("testnet", schema["info"]["description"])
        self.assertIn("/health", schema["paths"])
        body = schema["paths"]["/username"]["post"]["requestBody"]
        properties = body["content"]["application/json"]["schema"]["properties"]
        self.assertIn("username", properties)

    def test_framework_validation_errors_are_bad_requests(self):
        app = self.client.app

        @app.get("/probe")
        def probe(limit: int):
            return {"limit": limit}

        response = self.client.get("/probe", params={"limit": "many"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Bad Request")

    def test_username_requires_json_content_type(self):
        response = self.client.post(
            "/username",
            content=b'{"username": "alice_123"}',
            headers={"Content-Type": "text/plain"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"], ["Content-Type must be application/json"]
        )

    def test_username_accepts_json_content_type_with_charset(self):
        response = self.client.post(
            "/username",
            content=b'{"username": "alice_123"}',
            headers={"Content-Type": "application/json; charset=utf-8"},
        )
        self.assertEqual(response.status_code, 201)

    def test_cors_allows_any_origin_with_credentials(self):
        response = self.client.get("/health", headers={"Origin": "http://a.example"})
        self.assertEqual(response.status_code, 200)
        self.assertIn(
            response.headers["access-control-allow-origin"], ("http://a.example", "*")
        )
        self.assertEqual(response.headers["access-control-allow-credentials"], "true")

    def test_cors_preflight_for_username(self):
        response = self.client.options(
            "/username",
            headers={
                "Origin": "http://a.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn(
            response.headers["access-control-allow-origin"], ("http://a.example", "*")
        )
        self.assertEqual(response.headers["access-control-allow-credentials"], "true")
        self.assertIn("POST", response.headers["access-control-allow-methods"])

    def test_swagger_ui_is_served(self):
        response = self.client.get("/docs")
        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn("swagger-ui", response.text)

    def test_unhandled_errors_render_500_and_log_once(self):
        app = self.client.app

        @app.get("/boom")
        def boom():
            raise RuntimeError("kaput")

        client = TestClient(app, raise_server_exceptions=False)
        with self.assertLogs("quickex.errors", level="ERROR") as logs:
            response = client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(), {"statusCode": 500, "message": "Internal server error"}
        )
        self.assertEqual(len(logs.records), 1)
        self.assertIsNone(logs.records[0].exc_info)

    def test_store_is_held_on_app_state(self):
        self.assertIs(self.client.app.state.store, self.store)


if __name__ == "__main__":
    unittest.main()
