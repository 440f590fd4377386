"""Application factory for the square root playground."""
from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import AppConfig
from .routes import register_routes


def create_app(config: AppConfig | None = None) -> Flask:
    load_dotenv()
    app = Flask(__name__)
    CORS(app)

    config = config or AppConfig.from_env()

    app.config['PLAYGROUND_CONFIG'] = config
    app.extensions.setdefault('playground', {})
    app.extensions['playground'].update({'config': config})

    register_routes(app, config=config)

    return app


__all__ = ["create_app", "AppConfig"]
