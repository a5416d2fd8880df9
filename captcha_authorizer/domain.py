"""Core concepts of the CAPTCHA authorizer."""

from typing import Any, Optional, NamedTuple, Mapping, Tuple


class AuthorizationRequest(NamedTuple):
    """A single request for authorization, as received from the gateway."""

    token: Optional[str]
    """The CAPTCHA response token supplied by the client, if any."""

    resource: str
    """Identifier of the protected resource, e.g. an API Gateway method ARN."""

    @classmethod
    def from_event(cls, event: Mapping[str, Any], token_field: str,
                   resource_field: str) -> 'AuthorizationRequest':
        """
        Build a request from a raw invocation payload.

        Parameters
        ----------
        event : dict
            The payload passed by the caller.
        token_field : str
            Key under which the token is expected.
        resource_field : str
            Key under which the resource identifier is expected.

        Returns
        -------
        :class:`AuthorizationRequest`

        """
        return cls(token=event.get(token_field),
                   resource=event.get(resource_field, ''))

    @property
    def has_token(self) -> bool:
        """Indicates whether a non-blank token was supplied."""
        return bool(self.token and self.token.strip())


class VerificationCredentials(NamedTuple):
    """What we need in order to call the verification service."""

    secret_key: str
    verification_url: str

    def __repr__(self) -> str:
        """Keep the secret key out of logs and tracebacks."""
        return (f'VerificationCredentials(secret_key=<redacted>, '
                f'verification_url={self.verification_url!r})')


class VerificationOutcome(NamedTuple):
    """The verification service's verdict on a token."""

    success: bool
    """Whether the token was valid."""

    score: Optional[float] = None
    """Risk score, for providers that return one (1.0 is very likely human)."""

    hostname: Optional[str] = None
    """Hostname of the site where the challenge was solved."""

    challenge_ts: Optional[str] = None
    """ISO-8601 timestamp of the challenge."""

    error_codes: Tuple[str, ...] = ()
    """Provider error codes, e.g. ``timeout-or-duplicate``."""


class Decision(NamedTuple):
    """The outcome of authorizing a single request."""

    ALLOW = 'Allow'  # type: ignore
    DENY = 'Deny'  # type: ignore

    effect: str
    """One of :attr:`Decision.ALLOW` or :attr:`Decision.DENY`."""

    resource: Optional[str] = None
    """The resource on which access is granted. Only set when allowed."""

    reason: Optional[str] = None
    """Why the request was denied. Only set when denied."""

    @classmethod
    def allow(cls, resource: str) -> 'Decision':
        """Grant access to exactly ``resource``."""
        return cls(effect=cls.ALLOW, resource=resource)

    @classmethod
    def deny(cls, reason: str) -> 'Decision':
        """Deny access, for ``reason``."""
        return cls(effect=cls.DENY, reason=reason)

    @property
    def allowed(self) -> bool:
        return self.effect == self.ALLOW
