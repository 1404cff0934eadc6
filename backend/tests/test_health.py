from flask.testing import FlaskClient


def test_health_endpoint_returns_ok(client: FlaskClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "env": "test"}


def test_preflight_short_circuits_with_cors_headers(client: FlaskClient) -> None:
    response = client.options(
        "/api/impact/hero",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert response.status_code == 200
    assert response.data == b""
    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"
    assert response.headers.get("Access-Control-Allow-Credentials") == "true"


def test_unlisted_origin_gets_no_cors_grant(client: FlaskClient) -> None:
    response = client.get("/api/health", headers={"Origin": "https://evil.example"})

    assert response.status_code == 200
    assert "Access-Control-Allow-Origin" not in response.headers


def test_error_responses_include_cors_headers(client: FlaskClient) -> None:
    response = client.get("/api/impact/hero", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 404
    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"


def test_openapi_document_is_served(client: FlaskClient) -> None:
    response = client.get("/openapi/impact.yaml")
    assert response.status_code == 200
    assert b"Impact Report API" in response.data
