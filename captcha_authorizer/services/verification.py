"""
Integration with the CAPTCHA verification service.

Implements the ``siteverify`` protocol shared by Google reCAPTCHA, hCaptcha
and Cloudflare Turnstile: the secret key and the client's response token are
POSTed as form fields, and the service replies with a JSON object such as

.. code-block:: json

   {
       "success": true,
       "challenge_ts": "2024-01-01T00:00:00Z",
       "hostname": "example.com",
       "error-codes": []
   }

Only ``success`` is required. We make exactly one attempt per token; a token
can only be verified once, so retrying is pointless.
"""

import logging
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from ..domain import VerificationCredentials, VerificationOutcome
from ..exceptions import ConfigUnavailable, VerificationUnavailable

logger = logging.getLogger(__name__)


class VerificationService(object):
    """Calls the verification endpoint."""

    def __init__(self, timeout: float,
                 session: Optional[requests.Session] = None) -> None:
        """
        Set up the service.

        Parameters
        ----------
        timeout : float
            Seconds to wait for the service to connect and respond.
        session : :class:`requests.Session`
            Session to use for the outbound request. If not provided, a new
            session is used for each request.

        """
        self._timeout = timeout
        self._session = session

    def verify(self, credentials: VerificationCredentials,
               token: str) -> VerificationOutcome:
        """
        Ask the verification service whether ``token`` is valid.

        Parameters
        ----------
        credentials : :class:`VerificationCredentials`
            Secret key and endpoint for the service.
        token : str
            The response token submitted by the client.

        Returns
        -------
        :class:`VerificationOutcome`

        Raises
        ------
        :class:`ConfigUnavailable`
            Raised if the configured endpoint is not an HTTPS URL.
        :class:`VerificationUnavailable`
            Raised if the service could not be reached in time, responded with
            an error status, or returned something we can't interpret.

        """
        url = credentials.verification_url
        _check_url(url)
        data = {'secret': credentials.secret_key, 'response': token}
        session = self._session or requests.Session()
        try:
            response = session.post(url, data=data, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise VerificationUnavailable('Verification timed out') from e
        except requests.exceptions.RequestException as e:
            raise VerificationUnavailable(
                f'Verification request failed: {type(e).__name__}'
            ) from e
        finally:
            if self._session is None:
                session.close()

        logger.debug('Verification responded with %i', response.status_code)
        if not response.ok:
            raise VerificationUnavailable(
                f'Verification service returned {response.status_code}'
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise VerificationUnavailable('Response is not JSON') from e
        return _parse(payload)


def _check_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme != 'https' or not parsed.netloc:
        raise ConfigUnavailable('Verification endpoint is not an HTTPS URL')


def _parse(payload: Any) -> VerificationOutcome:
    """Extract an outcome from the service's response payload."""
    if not isinstance(payload, dict):
        raise VerificationUnavailable('Response is not a JSON object')
    success = payload.get('success')
    if not isinstance(success, bool):
        raise VerificationUnavailable('Response has no boolean success')

    score = payload.get('score')
    if score is not None:
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise VerificationUnavailable('Response has a non-numeric score')
        score = float(score)

    error_codes = payload.get('error-codes') or []
    if not isinstance(error_codes, list):
        error_codes = [error_codes]
    return VerificationOutcome(
        success=success,
        score=score,
        hostname=payload.get('hostname'),
        challenge_ts=payload.get('challenge_ts'),
        error_codes=tuple(str(code) for code in error_codes)
    )
