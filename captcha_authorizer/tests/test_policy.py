from unittest import TestCase

from captcha_authorizer import policy
from captcha_authorizer.domain import Decision

RESOURCE = 'arn:aws:execute-api:ap-southeast-2:123456789012:abc123/prod/GET/items'


class TestToResponse(TestCase):
    """Tests for :func:`policy.to_response`."""

    def test_allowed(self):
        """An allowed decision is rendered as an authorizer response."""
        response = policy.to_response(Decision.allow(RESOURCE), 'someone')
        self.assertEqual(response, {
            'principalId': 'someone',
            'policyDocument': {
                'Version': '2012-10-17',
                'Statement': [{
                    'Action': 'execute-api:Invoke',
                    'Effect': 'Allow',
                    'Resource': RESOURCE
                }]
            },
            'context': {'simpleAuth': True}
        })

    def test_no_wildcards(self):
        """The policy applies to the requested resource only."""
        response = policy.to_response(Decision.allow(RESOURCE), 'someone')
        for statement in response['policyDocument']['Statement']:
            self.assertNotIn('*', statement['Resource'])

    def test_denied(self):
        """Denials have no response document."""
        with self.assertRaises(ValueError):
            policy.to_response(Decision.deny('VerificationFailed'), 'someone')
