"""
Cognito identity delegate.
Credential checks are passed through to the user pool; tokens are returned to
the caller untouched apart from the decoded ID token claims.
"""

import logging
from typing import Any, Dict, Optional

import jwt
from botocore.exceptions import BotoCoreError, ClientError

from archive_api.errors import IdentityProviderError

logger = logging.getLogger(__name__)

# users in these states must set a new password before they get tokens
FIRST_LOGIN_STATUSES = ("FORCE_CHANGE_PASSWORD", "RESET_REQUIRED")

NEW_PASSWORD_CHALLENGE = "NEW_PASSWORD_REQUIRED"


def _provider_error(error: Exception) -> IdentityProviderError:
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        return IdentityProviderError(
            details.get("Message", str(error)),
            code=details.get("Code", "IdentityProviderError"),
        )
    return IdentityProviderError(str(error), code="IdentityProviderUnavailable")


def decode_id_token(id_token: str) -> Dict[str, Any]:
    """Claims of an ID token. The signature is not checked; the token came straight from Cognito."""
    try:
        return jwt.decode(id_token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise IdentityProviderError(f"Malformed ID token: {e}", code="InvalidIdToken") from e


class CognitoIdentityDelegate:
    """Thin wrapper over the cognito-idp client for one user pool and app client."""

    def __init__(self, cognito_client, user_pool_id: Optional[str], client_id: Optional[str]):
        self.client = cognito_client
        self.user_pool_id = user_pool_id
        self.client_id = client_id

    def _require_configuration(self) -> None:
        if not self.user_pool_id or not self.client_id:
            raise IdentityProviderError(
                "Cognito user pool is not configured",
                code="IdentityProviderUnavailable",
            )

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """Sign a user in.

        Returns the provider response: either `AuthenticationResult` tokens
        (with `decoded` ID token claims) or, on first login, a
        `NEW_PASSWORD_REQUIRED` challenge with its `Session`.
        """
        self._require_configuration()
        auth_parameters = {"USERNAME": username, "PASSWORD": password}

        try:
            user = self.client.admin_get_user(UserPoolId=self.user_pool_id, Username=username)
            is_first_login = user.get("UserStatus") in FIRST_LOGIN_STATUSES

            if is_first_login:
                logger.info(f"First login for {username}; requesting password challenge")
                result = self.client.admin_initiate_auth(
                    UserPoolId=self.user_pool_id,
                    ClientId=self.client_id,
                    AuthFlow="ADMIN_USER_PASSWORD_AUTH",
                    AuthParameters=auth_parameters,
                )
            else:
                result = self.client.initiate_auth(
                    ClientId=self.client_id,
                    AuthFlow="USER_PASSWORD_AUTH",
                    AuthParameters=auth_parameters,
                )
        except (ClientError, BotoCoreError) as e:
            logger.warning(f"Sign-in failed for {username}: {e}")
            raise _provider_error(e) from e

        result.pop("ResponseMetadata", None)
        tokens = result.get("AuthenticationResult")
        if tokens and tokens.get("IdToken"):
            tokens["decoded"] = decode_id_token(tokens["IdToken"])
        return result

    def respond_to_challenge(
        self,
        session: str,
        username: str,
        new_password: str,
        attributes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Answer the first-login NEW_PASSWORD_REQUIRED challenge; returns tokens."""
        self._require_configuration()
        challenge_responses = {
            "NEW_PASSWORD": new_password,
            "USERNAME": username,
        }
        for name, value in (attributes or {}).items():
            if value is not None:
                challenge_responses[f"userAttributes.{name}"] = value

        try:
            result = self.client.respond_to_auth_challenge(
                ClientId=self.client_id,
                ChallengeName=NEW_PASSWORD_CHALLENGE,
                Session=session,
                ChallengeResponses=challenge_responses,
            )
        except (ClientError, BotoCoreError) as e:
            logger.warning(f"Password challenge failed for {username}: {e}")
            raise _provider_error(e) from e

        result.pop("ResponseMetadata", None)
        return result
