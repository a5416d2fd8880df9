"""
Retrieves configuration parameters from the AWS SSM Parameter Store.

The CAPTCHA secret key and the URL of the verification endpoint are kept in
the parameter store rather than in the environment, so that the secret can be
rotated without redeploying the authorizer. The names of the parameters are
themselves configuration (see :mod:`captcha_authorizer.config`).

Parameters are looked up afresh on every call; nothing is cached. The store is
only ever read.
"""

import logging
from typing import Any, Mapping

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..domain import VerificationCredentials
from ..exceptions import ConfigUnavailable

logger = logging.getLogger(__name__)


class ParameterStore(object):
    """Thin wrapper around an SSM client."""

    def __init__(self, client: Any) -> None:
        """Use an existing SSM ``client``."""
        self._client = client

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'ParameterStore':
        """Create a parameter store for the configured region."""
        try:
            region = config['AWS_REGION']
        except KeyError as e:
            raise ConfigUnavailable('Missing required config parameter') from e
        return cls(boto3.client('ssm', region_name=region))

    def get_parameter(self, name: str) -> str:
        """
        Get the value of a parameter.

        Parameters
        ----------
        name : str
            Full name (path) of the parameter.

        Returns
        -------
        str

        Raises
        ------
        :class:`ConfigUnavailable`
            Raised if the store cannot be reached, the parameter does not
            exist, or it has no value.

        """
        logger.debug('Get parameter %s', name)
        try:
            response = self._client.get_parameter(Name=name,
                                                  WithDecryption=True)
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise ConfigUnavailable(f'Could not get {name}: {code}') from e
        except BotoCoreError as e:
            raise ConfigUnavailable(f'Parameter store unavailable: {e}') from e

        try:
            value = response['Parameter']['Value']
        except (KeyError, TypeError) as e:
            raise ConfigUnavailable(f'Malformed response for {name}') from e
        if not value:
            raise ConfigUnavailable(f'No value for {name}')
        return value

    def get_credentials(self, secret_key_name: str,
                        verification_url_name: str) \
            -> VerificationCredentials:
        """Get both of the parameters needed to verify a token."""
        return VerificationCredentials(
            secret_key=self.get_parameter(secret_key_name),
            verification_url=self.get_parameter(verification_url_name)
        )
