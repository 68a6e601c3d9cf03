"""
Shared test fixtures and configuration for qrest tests.
"""
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from qrest import create_app
from qrest.config import Config
from qrest.storage import Database


SAMPLE_DOCUMENT = """
{
  "posts": [
    {"id": 1, "title": "Testing", "author": "Foo"},
    {"id": 2, "title": "Testing Post ID 2", "author": "Bar"}
  ],
  "comments": [
    {"id": 1, "body": "Testing", "postId": 1},
    {"id": 2, "body": "Testing Comment ID 2", "postId": 2}
  ]
}
"""


class TestingConfig(Config):
    TESTING = True
    DB_PATH = None


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Write the sample document to a temporary backing file."""
    path = tmp_path / "db.json"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def database(db_file: Path) -> Database:
    """Load a Database from the temporary backing file."""
    return Database.load(db_file)


@pytest.fixture
def app(database: Database) -> Flask:
    """Create a Flask application serving the sample database."""
    app = create_app(TestingConfig, database)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()
