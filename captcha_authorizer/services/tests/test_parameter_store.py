from unittest import TestCase, mock

from botocore.exceptions import ClientError, EndpointConnectionError

from captcha_authorizer.domain import VerificationCredentials
from captcha_authorizer.exceptions import ConfigUnavailable
from captcha_authorizer.services import parameter_store


def _parameter(name: str, value: str) -> dict:
    return {
        'Parameter': {
            'Name': name,
            'Type': 'SecureString',
            'Value': value,
            'Version': 1
        }
    }


class TestGetParameter(TestCase):
    """Tests for :meth:`parameter_store.ParameterStore.get_parameter`."""

    def test_parameter_exists(self):
        """The parameter is in the store."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.return_value = \
            _parameter('/google/captcha_secret_key', 'foosecret')
        store = parameter_store.ParameterStore(mock_client)
        self.assertEqual(store.get_parameter('/google/captcha_secret_key'),
                         'foosecret')
        mock_client.get_parameter.assert_called_once_with(
            Name='/google/captcha_secret_key',
            WithDecryption=True
        )

    def test_parameter_not_found(self):
        """The parameter does not exist."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.side_effect = ClientError(
            {'Error': {'Code': 'ParameterNotFound', 'Message': ''}},
            'GetParameter'
        )
        store = parameter_store.ParameterStore(mock_client)
        with self.assertRaises(ConfigUnavailable):
            store.get_parameter('/google/nope')

    def test_store_unreachable(self):
        """The parameter store cannot be reached."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.side_effect = \
            EndpointConnectionError(endpoint_url='https://ssm.example.com')
        store = parameter_store.ParameterStore(mock_client)
        with self.assertRaises(ConfigUnavailable):
            store.get_parameter('/google/captcha_secret_key')

    def test_empty_value(self):
        """The parameter exists, but has no value."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.return_value = \
            _parameter('/google/captcha_secret_key', '')
        store = parameter_store.ParameterStore(mock_client)
        with self.assertRaises(ConfigUnavailable):
            store.get_parameter('/google/captcha_secret_key')

    def test_malformed_response(self):
        """The response does not contain a parameter."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.return_value = {}
        store = parameter_store.ParameterStore(mock_client)
        with self.assertRaises(ConfigUnavailable):
            store.get_parameter('/google/captcha_secret_key')


class TestGetCredentials(TestCase):
    """Tests for :meth:`parameter_store.ParameterStore.get_credentials`."""

    def test_both_parameters_exist(self):
        """Both the secret key and the endpoint are in the store."""
        values = {
            '/foo/secret': _parameter('/foo/secret', 'foosecret'),
            '/foo/url': _parameter('/foo/url', 'https://foo.com/siteverify')
        }
        mock_client = mock.MagicMock()
        mock_client.get_parameter.side_effect = \
            lambda Name, WithDecryption: values[Name]
        store = parameter_store.ParameterStore(mock_client)
        credentials = store.get_credentials('/foo/secret', '/foo/url')
        self.assertIsInstance(credentials, VerificationCredentials)
        self.assertEqual(credentials.secret_key, 'foosecret')
        self.assertEqual(credentials.verification_url,
                         'https://foo.com/siteverify')
        self.assertNotIn('foosecret', repr(credentials),
                         'Secret key is not exposed in repr')

    def test_endpoint_missing(self):
        """The secret key is in the store, but the endpoint is not."""
        mock_client = mock.MagicMock()
        mock_client.get_parameter.side_effect = [
            _parameter('/foo/secret', 'foosecret'),
            ClientError({'Error': {'Code': 'ParameterNotFound'}},
                        'GetParameter')
        ]
        store = parameter_store.ParameterStore(mock_client)
        with self.assertRaises(ConfigUnavailable):
            store.get_credentials('/foo/secret', '/foo/url')


class TestFromConfig(TestCase):
    """Tests for :meth:`parameter_store.ParameterStore.from_config`."""

    @mock.patch('captcha_authorizer.services.parameter_store.boto3')
    def test_region_from_config(self, mock_boto3):
        """The SSM client is created in the configured region."""
        parameter_store.ParameterStore.from_config(
            {'AWS_REGION': 'us-east-1'}
        )
        mock_boto3.client.assert_called_once_with('ssm',
                                                  region_name='us-east-1')

    @mock.patch('captcha_authorizer.services.parameter_store.boto3')
    def test_region_missing(self, mock_boto3):
        """The region is not configured."""
        with self.assertRaises(ConfigUnavailable):
            parameter_store.ParameterStore.from_config({})
        self.assertEqual(mock_boto3.client.call_count, 0)
