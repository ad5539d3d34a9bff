"""
Flask integration tests - the middleware installed on a real Flask app.
"""

from flask import Flask, jsonify, request

from oaschecker import get_conformance_middleware, setup_conformance_middleware
from wsgi_helpers import PETSTORE_BASE_URL


def _build_test_app(checker):
    app = Flask(__name__)
    received = []

    @app.route("/v1/pets", methods=["GET"])
    def list_pets():
        return jsonify([{"id": 123, "name": "Buddy"}])

    @app.route("/v1/pets", methods=["POST"])
    def create_pet():
        received.append(request.get_json(silent=True))
        return "", 201

    @app.route("/v1/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    middleware = setup_conformance_middleware(app, checker)
    app.config["TESTING"] = True
    return app, middleware, received


def test_setup_registers_middleware(checker):
    app, middleware, _ = _build_test_app(checker)

    assert app.wsgi_app is middleware
    assert get_conformance_middleware(app) is middleware


def test_conformant_flask_traffic(checker):
    app, middleware, received = _build_test_app(checker)
    client = app.test_client()

    get_response = client.get("/v1/pets", base_url=PETSTORE_BASE_URL)
    post_response = client.post(
        "/v1/pets",
        base_url=PETSTORE_BASE_URL,
        json={"name": "Buddy", "tag": "dog"},
    )

    assert get_response.status_code == 200
    assert get_response.get_json() == [{"id": 123, "name": "Buddy"}]
    assert post_response.status_code == 201
    assert received == [{"name": "Buddy", "tag": "dog"}]
    assert middleware.summarize() is None


def test_undocumented_flask_route_is_recorded(checker):
    app, middleware, _ = _build_test_app(checker)
    client = app.test_client()

    response = client.get("/v1/health", base_url=PETSTORE_BASE_URL)

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}

    issues = middleware.issues.snapshot()
    assert len(issues) == 1
    assert issues[0].uri == "http://petstore.swagger.io/v1/health"
    assert issues[0].description.startswith("Route not found in specification: ")


def test_nonconformant_flask_request_body(checker):
    app, middleware, received = _build_test_app(checker)
    client = app.test_client()

    client.post("/v1/pets", base_url=PETSTORE_BASE_URL, json={"tag": "no-name"})

    assert received == [{"tag": "no-name"}]
    issues = middleware.issues.snapshot()
    assert len(issues) == 1
    assert issues[0].description.startswith("Invalid request: ")


def test_setup_from_env(monkeypatch, petstore_path):
    monkeypatch.setenv("OAS_CHECKER_SPEC_PATH", str(petstore_path))
    app = Flask(__name__)

    middleware = setup_conformance_middleware(app)

    assert get_conformance_middleware(app) is middleware
