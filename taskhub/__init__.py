# taskhub/__init__.py
import os
from flask import Flask
from dotenv import load_dotenv
from flask_cors import CORS
from flask import current_app

from .core.database import connect, close_client, init_db
from .core.errors import register_error_handlers


def create_app(config=None, mongo_client=None):
    load_dotenv()
    app = Flask(__name__)

    # ---- Config ----
    app.config["MONGO_URL"] = os.environ.get("MONGO_URL")
    app.config["MONGO_DB"] = os.environ.get("MONGO_DB", "taskhub")
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO")
    if config:
        app.config.update(config)

    app.logger.setLevel(str(app.config["LOG_LEVEL"]).upper())

    # ---- Document store (one client per process) ----
    if mongo_client is None:
        url = app.config["MONGO_URL"]
        if not url:
            raise RuntimeError("MONGO_URL is not set. Put it in your .env")
        mongo_client = connect(url)
    app.extensions["mongo"] = mongo_client
    init_db(mongo_client[app.config["MONGO_DB"]])

    CORS(app, send_wildcard=True)

    register_error_handlers(app)

    # ---- Blueprints ----
    from taskhub.routes.users import users_bp
    from taskhub.routes.projects import projects_bp
    from taskhub.routes.tasks import tasks_bp

    app.register_blueprint(users_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(tasks_bp)

    app.logger.info("taskhub ready (database %s)", app.config["MONGO_DB"])
    return app


def get_db():
    client = current_app.extensions["mongo"]
    return client[current_app.config["MONGO_DB"]]


def close_db(app):
    """Close the process-wide client; safe to call more than once."""
    client = app.extensions.pop("mongo", None)
    if client is not None:
        close_client(client)
