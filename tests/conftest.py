import pytest

from playground import create_app

ENV_VARS = ("DEBUG_LOG", "ROOT_CHECK_NUMBER", "HOST", "PORT", "FLASK_DEBUG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of AppConfig.from_env()."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("playground.load_dotenv", lambda: False)
    monkeypatch.setattr("playground.cli.load_dotenv", lambda: False)


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
