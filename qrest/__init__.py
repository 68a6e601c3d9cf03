from flask import Flask
from .config import Config
from .extensions import cors, init_database
from .storage.codec import QrestJSONProvider


def create_app(config_class: type[Config] = Config, database=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json = QrestJSONProvider(app)

    # Extensions
    cors.init_app(app)
    database = init_database(app, database)
    app.logger.info("Serving collections: %s", ", ".join(sorted(database.collections())))

    # Blueprints
    from .routes.db import bp as db_bp
    from .routes.collections_api import bp as collections_api

    app.register_blueprint(db_bp)
    app.register_blueprint(collections_api)

    return app
