"""
Lightweight authorizer that gates API requests on a CAPTCHA check.

The authorizer is invoked by the routing layer in front of a protected API,
once per request. In the primary deployment scenario it runs as an API Gateway
Lambda authorizer (see :mod:`captcha_authorizer.handler`): API Gateway passes
the client's CAPTCHA response token in the ``authorizationToken`` field of the
event, along with the ARN of the method being invoked. Alternatively, the
same logic can be served to a reverse proxy as a Flask application (see
:mod:`captcha_authorizer.factory`) that answers ``auth_request`` sub-requests.

For each request the authorizer:

1. rejects the request outright if no token was supplied;
2. retrieves the CAPTCHA secret key and the verification endpoint from the
   parameter store (see :mod:`captcha_authorizer.services.parameter_store`);
3. asks the verification service whether the token is valid (see
   :mod:`captcha_authorizer.services.verification`);
4. grants invocation rights on exactly the requested resource if it is, or
   signals that the request is unauthorized if it is not.

Any failure along the way results in a denial. Failures of our dependencies
(parameter store, verification service) are logged as errors, so that they can
be told apart from clients that simply failed the challenge.
"""
