import logging

from flask import Flask, jsonify
from flask_cors import CORS

from todo_backend.errors import register_error_handlers
from todo_backend.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def create_app(config_object="todo_backend.config.Config", task_store=None):
    """Build the API app.

    ``task_store`` replaces the MongoDB-backed store, which is how tests run
    the routes against an in-memory one.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False

    setup_logging(app.config["LOG_LEVEL"], json_output=app.config["LOG_JSON"])

    # Core extensions
    origins = app.config["CORS_ORIGINS"]
    CORS(app, resources={r"/todos*": {"origins": origins.split(",") if origins != "*" else "*"}})

    from todo_backend.utils.db import init_app as init_db

    init_db(app, task_store=task_store)
    register_error_handlers(app)

    # Register blueprints
    from todo_backend.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/todos")

    @app.get("/health")
    def health():
        return jsonify(status="ok", service="todo-api"), 200

    return app


def main():
    app = create_app()
    logger.info(
        "server starting",
        extra={"host": app.config["HOST"], "port": app.config["PORT"]},
    )
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    # Direct run support: python -m todo_backend.app
    main()
