"""Install the CAPTCHA authorizer."""

from setuptools import setup, find_packages

setup(
    name='captcha-authorizer',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "boto3",
        "flask",
        "python-json-logger",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False
)
