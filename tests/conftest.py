import pytest
from app import create_app

# Creates a Flask app with dummy provider keys for tests.
@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("OPEN_WEATHER_KEY", "test-weather-key")
    monkeypatch.setenv("GEMINI_KEY", "test-gemini-key")
    for name in ("GEMINI_MODEL", "WEATHER_URL", "WEATHER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    app = create_app()
    app.config.update(TESTING=True)
    yield app

@pytest.fixture()
def client(app):
    return app.test_client()

# A provider payload as the current-weather endpoint returns it.
@pytest.fixture()
def madrid_payload():
    return {
        "name": "Madrid",
        "sys": {"country": "ES"},
        "main": {"temp": 21.4, "temp_min": 18.0, "temp_max": 24.9},
        "weather": [{"description": "cielo claro"}],
    }
