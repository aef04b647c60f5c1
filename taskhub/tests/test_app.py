from unittest.mock import patch

import mongomock
import pytest

from taskhub import create_app, close_db


def test_unknown_endpoint(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.get_data(as_text=True) == "Endpoint not found"


def test_unsupported_method_is_not_found(client):
    r = client.put("/users", json={})
    assert r.status_code == 404
    assert r.get_data(as_text=True) == "Endpoint not found"


def test_errors_are_plain_text(client):
    r = client.delete("/users")
    assert r.status_code == 400
    assert r.mimetype == "text/plain"


@patch("taskhub.load_dotenv")
def test_missing_mongo_url_fails_fast(_load_dotenv, monkeypatch):
    monkeypatch.delenv("MONGO_URL", raising=False)
    with pytest.raises(RuntimeError, match="MONGO_URL"):
        create_app()


@patch("taskhub.connect")
@patch("taskhub.load_dotenv")
def test_mongo_url_from_environment(_load_dotenv, mock_connect, monkeypatch):
    monkeypatch.setenv("MONGO_URL", "mongodb://db.example:27017")
    monkeypatch.setenv("MONGO_DB", "envdb")
    mock_connect.return_value = mongomock.MongoClient()

    app = create_app({"TESTING": True})

    mock_connect.assert_called_once_with("mongodb://db.example:27017")
    assert app.config["MONGO_DB"] == "envdb"


def test_unique_email_index_created(db, app):
    info = db["users"].index_information()
    assert info["uniq_user_email"]["unique"] is True


def test_close_db_releases_client(mongo_client):
    app = create_app({"TESTING": True}, mongo_client=mongo_client)
    with patch.object(mongo_client, "close") as mock_close:
        close_db(app)
        close_db(app)
    mock_close.assert_called_once()
    assert "mongo" not in app.extensions


@patch("taskhub.services.users.list_users", side_effect=RuntimeError("boom"))
def test_unexpected_error_is_500(_list_users, client):
    r = client.get("/users")
    assert r.status_code == 500
    assert r.get_data(as_text=True) == "Internal server error"


def test_cors_headers(client):
    r = client.get("/users", headers={"Origin": "http://example.com"})
    assert r.headers.get("Access-Control-Allow-Origin") == "*"
