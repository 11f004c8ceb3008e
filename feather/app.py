"""
Application factory
"""

# Python Packages
import logging

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db
from .logic_scripts.services.script_cache import init_script_cache
from .util.logger import configure_logging


logger = logging.getLogger(__name__)





def create_app(config_overrides: dict = None):
    """
    Application Factory

    Args:
        config_overrides (dict): Flask config values applied before the
            database is initialised (tests use it for SQLALCHEMY_DATABASE_URI)
    """

    configure_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY
    app.config["LOGIC_SCRIPTS_FAIL_OPEN"] = constants.LOGIC_SCRIPTS_FAIL_OPEN
    app.config["LOGIC_SCRIPTS_CACHE_TTL"] = constants.LOGIC_SCRIPTS_CACHE_TTL

    if config_overrides:
        app.config.update(config_overrides)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app, origins = constants.APP_CORS_ORIGINS)

    # Register Namespaces (before Swagger init so every app gets the routes)
    URLs.add_namespaces()

    # Initialize Swagger
    api.init_app(app)

    # Active script cache
    init_script_cache(app, app.config["LOGIC_SCRIPTS_CACHE_TTL"])

    logger.info("🚀 Feather app ready (env=%s)", constants.APP_ENV)
    return app



# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
