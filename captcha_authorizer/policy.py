"""Renders authorization decisions in the form expected by API Gateway."""

from typing import Any, Dict

from .domain import Decision

POLICY_VERSION = '2012-10-17'
INVOKE_ACTION = 'execute-api:Invoke'


def generate_policy(effect: str, resource: str) -> Dict[str, Any]:
    """
    Generate an IAM policy document with a single statement.

    Parameters
    ----------
    effect : str
        ``Allow`` or ``Deny``.
    resource : str
        The exact resource to which the statement applies.

    Returns
    -------
    dict

    """
    return {
        'Version': POLICY_VERSION,
        'Statement': [{
            'Action': INVOKE_ACTION,
            'Effect': effect,
            'Resource': resource
        }]
    }


def to_response(decision: Decision, principal_id: str) -> Dict[str, Any]:
    """
    Generate an authorizer response for an allowed request.

    The policy grants invocation of the requested resource only, and the
    context tells downstream integrations that access was granted on the
    strength of a CAPTCHA.

    Raises
    ------
    :class:`ValueError`
        Raised if ``decision`` does not allow access; denials have no
        response document.

    """
    if not decision.allowed or not decision.resource:
        raise ValueError('Only allowed decisions can be rendered')
    return {
        'principalId': principal_id,
        'policyDocument': generate_policy(Decision.ALLOW, decision.resource),
        'context': {'simpleAuth': True}
    }
