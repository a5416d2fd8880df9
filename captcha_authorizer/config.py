"""Configuration for the CAPTCHA authorizer."""

import os

AWS_REGION = os.environ.get('AWS_REGION', 'ap-southeast-2')
"""Region of the parameter store."""

CAPTCHA_SECRET_KEY_PARAM = os.environ.get('CAPTCHA_SECRET_KEY_PARAM',
                                          '/google/captcha_secret_key')
"""Name of the parameter that holds the CAPTCHA secret key."""

CAPTCHA_VERIFICATION_URL_PARAM = os.environ.get(
    'CAPTCHA_VERIFICATION_URL_PARAM',
    '/google/google_captch_verification_url'
)
"""Name of the parameter that holds the verification endpoint URL."""

TOKEN_FIELD = os.environ.get('TOKEN_FIELD', 'authorizationToken')
RESOURCE_FIELD = os.environ.get('RESOURCE_FIELD', 'methodArn')

TOKEN_HEADER = os.environ.get('TOKEN_HEADER', 'X-Captcha-Token')
RESOURCE_HEADER = os.environ.get('RESOURCE_HEADER', 'X-Original-URI')

VERIFICATION_TIMEOUT = float(os.environ.get('VERIFICATION_TIMEOUT', '5'))
"""Seconds to wait on the verification service before giving up."""

_min_score = os.environ.get('MIN_SCORE')
MIN_SCORE = float(_min_score) if _min_score else None
"""
Lowest acceptable score, for providers that return one (e.g. reCAPTCHA v3).

If not set, only the ``success`` flag is considered.
"""

PRINCIPAL_ID = os.environ.get('PRINCIPAL_ID', 'captcha-user')

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')
