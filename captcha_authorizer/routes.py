"""
Routes for authorizing reverse-proxy sub-requests.

The proxy (e.g. NGINX with ``auth_request``) forwards the client's CAPTCHA
token in a header, along with the URI that the client is trying to reach. We
respond with 200 and the granted policy if the request may proceed, or 401.
"""

import logging
import traceback
from http import HTTPStatus as status

from flask import Blueprint, current_app, request, jsonify
from werkzeug.exceptions import Unauthorized

from .authorizer import Authorizer
from .domain import AuthorizationRequest
from .policy import to_response

logger = logging.getLogger(__name__)

blueprint = Blueprint('captcha_authorizer', __name__, url_prefix='')


@blueprint.route('/auth', methods=['GET'])
def authorize():
    """Authorize the request."""
    try:
        token_header = current_app.config['TOKEN_HEADER']
        resource_header = current_app.config['RESOURCE_HEADER']
    except KeyError as e:
        raise RuntimeError('Configuration error: missing parameter') from e

    auth_request = AuthorizationRequest(
        token=request.headers.get(token_header),
        resource=request.headers.get(resource_header, '')
    )
    try:
        decision = Authorizer.from_config(current_app.config) \
            .authorize(auth_request)
        if decision.allowed:
            principal_id = current_app.config['PRINCIPAL_ID']
            return jsonify(to_response(decision, principal_id)), status.OK
    except Exception as e:
        logger.error('Unhandled exception: %s', e)
        logger.error(traceback.format_exc())
        raise Unauthorized('CAPTCHA verification required') from e
    raise Unauthorized('CAPTCHA verification required')
