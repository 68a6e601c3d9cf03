# qrest/extensions.py
from flask import current_app
from flask_cors import CORS

from .storage import Database

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

EXTENSION_KEY = "qrest"


def init_database(app, database: Database = None) -> Database:
    """Attach the database to the app, loading it from DB_PATH if not given."""
    if database is None:
        path = app.config.get("DB_PATH")
        if not path:
            raise RuntimeError("DB_PATH is not configured; pass the JSON file to run.py")
        database = Database.load(path)
    app.extensions[EXTENSION_KEY] = database
    return database


def get_database() -> Database:
    return current_app.extensions[EXTENSION_KEY]
