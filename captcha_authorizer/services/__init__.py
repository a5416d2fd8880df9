"""Integrations with the parameter store and the verification service."""
