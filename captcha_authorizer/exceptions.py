"""Exceptions raised while authorizing a request."""


class AuthorizationFailed(RuntimeError):
    """Base class for all of the reasons a request may be denied."""

    reason = 'AuthorizationFailed'


class TokenMissing(AuthorizationFailed):
    """The request did not include a CAPTCHA token."""

    reason = 'TokenMissing'


class ConfigUnavailable(AuthorizationFailed):
    """A required configuration parameter could not be retrieved."""

    reason = 'ConfigUnavailable'


class VerificationUnavailable(AuthorizationFailed):
    """The verification service could not be reached or misbehaved."""

    reason = 'VerificationUnavailable'


class VerificationFailed(AuthorizationFailed):
    """The verification service rejected the token."""

    reason = 'VerificationFailed'


class Unauthorized(Exception):
    """
    Signals to API Gateway that the request is not authorized.

    API Gateway matches on the exact message ``Unauthorized`` and responds to
    the client with 401.
    """

    def __init__(self) -> None:
        super(Unauthorized, self).__init__('Unauthorized')
