"""API Endpoint Tests."""

from fastapi.testclient import TestClient

from apps.mcp_server.main import create_app


def test_root_endpoint(app_client):
    """Test root endpoint returns API info."""
    response = app_client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Zeal"
    assert response.json()["endpoints"]["mcp"] == "POST /mcp"


def test_healthz_returns_200(app_client):
    """Test liveness probe."""
    response = app_client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readyz_returns_ready(app_client):
    """Test readiness probe."""
    response = app_client.get("/readyz")
    assert response.status_code == 200
    assert response.json()["tool_count"] == 3


def test_readyz_without_tools(settings):
    with TestClient(create_app(settings, sources=[])) as client:
        response = client.get("/readyz")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


def test_metrics_exposed(app_client):
    """Test Prometheus metrics endpoint."""
    response = app_client.get("/metrics")
    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]
    assert "tools_registered" in response.text


def test_request_id_is_echoed(app_client):
    response = app_client.get("/healthz", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Response-Time"].endswith("ms")


def test_request_id_is_generated(app_client):
    response = app_client.get("/healthz")

    assert response.headers["X-Request-ID"]


def test_list_tools_in_discovery_order(app_client):
    response = app_client.get("/tools")

    assert response.status_code == 200
    assert [t["function"]["name"] for t in response.json()] == [
        "get_employees",
        "create_company",
        "echo",
    ]
    assert response.json()[0]["type"] == "function"


def test_list_tools_by_capability(app_client):
    response = app_client.get("/tools", params={"capability": "zeal.write"})

    assert [t["function"]["name"] for t in response.json()] == ["create_company"]


def test_get_tool(app_client):
    response = app_client.get("/tools/get_employees")

    assert response.status_code == 200
    body = response.json()
    assert body["definition"]["function"]["name"] == "get_employees"
    assert body["metadata"]["capabilities"] == ["zeal.read"]
    assert body["source"] == "zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES"


def test_get_unknown_tool_returns_404(app_client):
    response = app_client.get("/tools/nope")

    assert response.status_code == 404


def test_invoke_tool(app_client):
    response = app_client.post(
        "/tools/echo/invoke", json={"a": 1}, headers={"X-Request-ID": "req-9"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "echo": {"a": 1},
        "ctx": {"request_id": "req-9", "dry_run": False},
    }


def test_invoke_without_body(app_client):
    response = app_client.post("/tools/echo/invoke")

    assert response.status_code == 200
    assert response.json()["echo"] == {}


def test_invoke_dry_run(app_client):
    response = app_client.post(
        "/tools/get_employees/invoke", params={"dry_run": "true"}, json={"companyID": "co_1"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "dry_run"
    assert body["would_execute"]["params"] == {"companyID": "co_1"}


def test_invoke_validation_error_is_a_value(app_client):
    response = app_client.post("/tools/get_employees/invoke", json={})

    assert response.status_code == 200
    assert "'companyID' is a required property" in response.json()["error"]


def test_invoke_without_api_key(settings_without_key):
    sources = ["zeal_tools.adapters.zeal.tools.employees:GET_EMPLOYEES"]
    with TestClient(create_app(settings_without_key, sources)) as client:
        response = client.post("/tools/get_employees/invoke", json={"companyID": "co_1"})

    assert response.status_code == 200
    assert response.json() == {
        "error": "An error occurred while retrieving employees: "
        "Zeal API key is not configured (set ZEAL_API_KEY)"
    }


def test_invoke_unknown_tool_returns_404(app_client):
    response = app_client.post("/tools/nope/invoke", json={})

    assert response.status_code == 404


def test_invoke_rejects_non_object_body(app_client):
    response = app_client.post("/tools/echo/invoke", json=[1, 2])

    assert response.status_code == 422
