"""Delegates sign-in and first-login password challenges to Cognito."""

from .cognito import CognitoIdentityDelegate

__all__ = ['CognitoIdentityDelegate']
