from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config
from .context import AppContext, EXTENSION_KEY, get_context
from .errors import register_error_handlers

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "WorldView API",
        "version": "1.0.0",
        "description": "Accounts, sessions and favorite countries for the WorldView country explorer.",
    },
    "basePath": "/",  # blueprints are mounted under /api
    "schemes": ["http", "https"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None, config_overrides: dict | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    Storage, token codec and response cache are built here and attached to
    app.extensions, so every app instance (and every test) is isolated.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    if config_overrides:
        app.config.update(config_overrides)

    # Credentialed CORS so the browser client can send the session cookie
    CORS(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", [])}},
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Uniform error envelope for every failure
    register_error_handlers(app)

    app.extensions[EXTENSION_KEY] = AppContext.from_config(app.config)

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .favorites import bp as favorites_bp
    from .countries import bp as countries_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(favorites_bp, url_prefix="/api/favorites")
    app.register_blueprint(countries_bp, url_prefix="/api/countries")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        get_context(app).storage.close()

    @app.route("/")
    def root():
        return {
            "message": "WorldView API is running!",
            "docs": "/apidocs/",
            "health": "/api/health",
        }, 200

    return app
