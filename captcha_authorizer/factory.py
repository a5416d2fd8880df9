"""Provides an app factory for serving the authorizer over HTTP."""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from . import routes
from .app_logging import setup_logger


def jsonify_exception(error: HTTPException):
    exc_resp = error.get_response()
    response = jsonify(reason=error.description)
    response.status_code = exc_resp.status_code
    return response


def create_app() -> Flask:
    """Initialize an instance of the authorizer service."""
    app = Flask('captcha_authorizer')
    app.config.from_pyfile('config.py')
    setup_logger(app.config['LOGLEVEL'])

    app.register_blueprint(routes.blueprint)
    app.errorhandler(HTTPException)(jsonify_exception)
    return app
