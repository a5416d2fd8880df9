"""
Entry point for running the authorizer as an API Gateway Lambda authorizer.

API Gateway invokes :func:`handler` with a ``TOKEN`` authorizer event, e.g.

.. code-block:: python

   {
       'type': 'TOKEN',
       'authorizationToken': '03AGdBq24...',
       'methodArn': 'arn:aws:execute-api:ap-southeast-2:123456789012:abc/prod/GET/items'
   }

If the token checks out, we return a policy allowing invocation of that
method. Otherwise we raise :class:`.Unauthorized`, which API Gateway turns
into a 401 response to the client.
"""

import logging
from typing import Any, Dict, Mapping

from . import config
from .app_logging import setup_logger
from .authorizer import Authorizer
from .domain import AuthorizationRequest
from .exceptions import Unauthorized
from .policy import to_response

logger = logging.getLogger(__name__)


def get_settings() -> Dict[str, Any]:
    """Get the current configuration as a dict."""
    return {key: getattr(config, key) for key in dir(config)
            if key.isupper()}


def handler(event: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    """
    Authorize a request from API Gateway.

    Parameters
    ----------
    event : dict
        The authorizer event.
    context : object
        Lambda runtime context; not used.

    Returns
    -------
    dict
        An authorizer response with an IAM policy and context.

    Raises
    ------
    :class:`.Unauthorized`
        Raised if the request is not authorized, for whatever reason.

    """
    settings = get_settings()
    setup_logger(settings['LOGLEVEL'])
    request = AuthorizationRequest.from_event(event,
                                              settings['TOKEN_FIELD'],
                                              settings['RESOURCE_FIELD'])
    try:
        decision = Authorizer.from_config(settings).authorize(request)
        if decision.allowed:
            return to_response(decision, settings['PRINCIPAL_ID'])
    except Exception as e:
        logger.exception('Unhandled exception while authorizing: %s', e)
        raise Unauthorized() from e
    raise Unauthorized()
