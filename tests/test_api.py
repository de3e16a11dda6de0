# File: tests/test_api.py
# Purpose: HTTP surface: health check, success payload and error mapping


def test_health_check(app_client_factory):
    response = app_client_factory().get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "commitgen"
    assert data["llm_enabled"] is True


def test_generate_commit_message(app_client_factory):
    response = app_client_factory().post("/api/v1/commit-message")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "message": "feat: add new feature", "warnings": []}
    assert response.headers["x-request-id"]


def test_long_subject_returns_warning(app_client_factory):
    client = app_client_factory(LLM_COMMAND=f"echo 'feat: {'x' * 80}'")

    data = client.post("/api/v1/commit-message").json()

    assert data["ok"] is True
    assert data["warnings"] == ["commit subject exceeds 72 characters: 86"]


def test_disabled(app_client_factory):
    response = app_client_factory(LLM_ENABLED=False).post("/api/v1/commit-message")

    assert response.status_code == 403
    data = response.json()
    assert data["ok"] is False
    assert data["error"] == "feature_disabled"
    assert data["message"] == "LLM commit generation is disabled in config"


def test_not_configured(app_client_factory):
    response = app_client_factory(LLM_COMMAND="").post("/api/v1/commit-message")

    assert response.status_code == 409
    assert response.json()["error"] == "command_not_configured"


def test_upstream_error(app_client_factory):
    client = app_client_factory(LLM_COMMAND="echo 'error: API rate limit exceeded'")

    response = client.post("/api/v1/commit-message")

    assert response.status_code == 502
    data = response.json()
    assert data["error"] == "upstream_reported_error"
    assert data["message"] == "error: API rate limit exceeded"
    assert data["detail"] == "error: API rate limit exceeded"
    assert data["request_id"] == response.headers["x-request-id"]


def test_command_failure(app_client_factory):
    client = app_client_factory(LLM_COMMAND="echo 'msg' >&2; exit 1")

    data = client.post("/api/v1/commit-message").json()

    assert data["error"] == "command_failed"
    assert data["detail"] == "msg"


def test_timeout(app_client_factory):
    client = app_client_factory(LLM_COMMAND="sleep 5", LLM_TIMEOUT_S=1)

    response = client.post("/api/v1/commit-message")

    assert response.status_code == 504
    assert response.json()["error"] == "timeout"


def test_language_from_request(app_client_factory):
    client = app_client_factory(LLM_COMMAND="echo ''")

    response = client.post("/api/v1/commit-message", json={"language": "zh"})

    assert response.status_code == 502
    assert response.json()["message"] == "LLM 命令返回为空"


def test_language_from_settings(app_client_factory):
    client = app_client_factory(LLM_COMMAND="echo ''", LANGUAGE="zh")

    assert client.post("/api/v1/commit-message").json()["message"] == "LLM 命令返回为空"


def test_rejects_unknown_language(app_client_factory):
    response = app_client_factory().post("/api/v1/commit-message", json={"language": "fr"})
    assert response.status_code == 422
