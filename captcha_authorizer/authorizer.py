"""
Decides whether a request may proceed, based on its CAPTCHA token.

:class:`Authorizer` runs the whole check for a single request: it makes sure
that a token was supplied, retrieves the secret key and verification endpoint
from the parameter store, asks the verification service about the token, and
maps the verdict onto a :class:`.Decision`.

The authorizer fails closed: every problem results in a denial. Problems with
our own dependencies are logged as errors, whereas clients that fail the
challenge are an expected part of doing business and are logged at info.
"""

import logging
from typing import Any, Mapping, Optional

from .domain import AuthorizationRequest, Decision, VerificationOutcome
from .exceptions import ConfigUnavailable, TokenMissing, \
    VerificationFailed, VerificationUnavailable
from .services.parameter_store import ParameterStore
from .services.verification import VerificationService

logger = logging.getLogger(__name__)


class Authorizer(object):
    """Authorizes requests that carry a CAPTCHA token."""

    def __init__(self, parameters: ParameterStore,
                 verifier: VerificationService, secret_key_name: str,
                 verification_url_name: str,
                 min_score: Optional[float] = None) -> None:
        """
        Set up the authorizer.

        Parameters
        ----------
        parameters : :class:`.ParameterStore`
            Source of the secret key and the verification endpoint.
        verifier : :class:`.VerificationService`
            Client for the verification service.
        secret_key_name : str
            Name of the parameter that holds the secret key.
        verification_url_name : str
            Name of the parameter that holds the verification endpoint.
        min_score : float
            If set, a successful verification must also carry a score of at
            least this much.

        """
        self._parameters = parameters
        self._verifier = verifier
        self._secret_key_name = secret_key_name
        self._verification_url_name = verification_url_name
        self._min_score = min_score

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'Authorizer':
        """Create an authorizer with real collaborators."""
        try:
            secret_key_name = config['CAPTCHA_SECRET_KEY_PARAM']
            verification_url_name = config['CAPTCHA_VERIFICATION_URL_PARAM']
            timeout = config['VERIFICATION_TIMEOUT']
        except KeyError as e:
            raise ConfigUnavailable('Missing required config parameter') from e
        return cls(ParameterStore.from_config(config),
                   VerificationService(timeout=timeout),
                   secret_key_name, verification_url_name,
                   min_score=config.get('MIN_SCORE'))

    def authorize(self, request: AuthorizationRequest) -> Decision:
        """
        Decide whether ``request`` may proceed.

        Parameters
        ----------
        request : :class:`.AuthorizationRequest`

        Returns
        -------
        :class:`.Decision`
            Allows access to exactly ``request.resource``, or denies it with
            the name of the reason.

        """
        try:
            self._check(request)
        except (TokenMissing, VerificationFailed) as e:
            logger.info('Denied %s: %s', request.resource, e)
            return Decision.deny(e.reason)
        except (ConfigUnavailable, VerificationUnavailable) as e:
            logger.error('Denied %s; %s: %s', request.resource, e.reason, e)
            return Decision.deny(e.reason)
        logger.info('Allowed %s', request.resource)
        return Decision.allow(request.resource)

    def _check(self, request: AuthorizationRequest) -> None:
        """Raise an :class:`.AuthorizationFailed` unless the token is good."""
        if not request.has_token:
            raise TokenMissing('No CAPTCHA token in request')

        credentials = self._parameters.get_credentials(
            self._secret_key_name,
            self._verification_url_name
        )
        outcome = self._verifier.verify(credentials, request.token)
        self._evaluate(outcome)

    def _evaluate(self, outcome: VerificationOutcome) -> None:
        if not outcome.success:
            codes = ', '.join(outcome.error_codes) or 'none'
            raise VerificationFailed(f'Token rejected (error codes: {codes})')
        if self._min_score is None:
            return
        # Providers that score requests must tell us the score.
        if outcome.score is None:
            raise VerificationUnavailable('Expected a score, got none')
        if outcome.score < self._min_score:
            raise VerificationFailed(
                f'Score {outcome.score} is below {self._min_score}'
            )
