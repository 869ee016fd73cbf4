import pytest
from fastapi import status
from fastapi.testclient import TestClient

from archive_api.errors import IdentityProviderError
from archive_api.identity import CognitoIdentityDelegate
from tests.consts import TEST_CLIENT_ID, TEST_USER_POOL_ID
from tests.fixtures.cognito import ID_TOKEN_CLAIMS, FakeCognitoClient, make_client_error


def test_signin_returns_tokens_with_decoded_claims(client: TestClient, cognito_client: FakeCognitoClient):
    response = client.post("/auth/signin", data={"email": "ada@example.org", "password": "hunter22"})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert "ResponseMetadata" not in body
    assert body["AuthenticationResult"]["AccessToken"] == "access-token"
    assert body["AuthenticationResult"]["decoded"] == ID_TOKEN_CLAIMS

    name, kwargs = cognito_client.calls[-1]
    assert name == "initiate_auth"
    assert kwargs["AuthFlow"] == "USER_PASSWORD_AUTH"
    assert kwargs["ClientId"] == TEST_CLIENT_ID
    assert kwargs["AuthParameters"] == {"USERNAME": "ada@example.org", "PASSWORD": "hunter22"}


def test_first_login_returns_new_password_challenge(client: TestClient, cognito_client: FakeCognitoClient):
    cognito_client.user_status = "FORCE_CHANGE_PASSWORD"

    response = client.post("/auth/signin", data={"email": "ada@example.org", "password": "temporary"})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["ChallengeName"] == "NEW_PASSWORD_REQUIRED"
    assert body["Session"] == "challenge-session"

    name, kwargs = cognito_client.calls[-1]
    assert name == "admin_initiate_auth"
    assert kwargs["UserPoolId"] == TEST_USER_POOL_ID
    assert kwargs["AuthFlow"] == "ADMIN_USER_PASSWORD_AUTH"


def test_signin_rejection_is_passed_through(client: TestClient, cognito_client: FakeCognitoClient):
    cognito_client.error = make_client_error(
        "NotAuthorizedException", "Incorrect username or password.", "AdminGetUser"
    )

    response = client.post("/auth/signin", data={"email": "ada@example.org", "password": "wrong"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "detail": "Incorrect username or password.",
        "code": "NotAuthorizedException",
    }


def test_register_answers_the_challenge(client: TestClient, cognito_client: FakeCognitoClient):
    response = client.post(
        "/auth/register",
        data={
            "session": "challenge-session",
            "newPassword": "a-better-password",
            "username": "ada@example.org",
            "firstName": "Ada",
            "lastName": "Lovelace",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["AuthenticationResult"]["IdToken"] == cognito_client.id_token

    name, kwargs = cognito_client.calls[-1]
    assert name == "respond_to_auth_challenge"
    assert kwargs["ChallengeName"] == "NEW_PASSWORD_REQUIRED"
    assert kwargs["Session"] == "challenge-session"
    assert kwargs["ChallengeResponses"] == {
        "NEW_PASSWORD": "a-better-password",
        "USERNAME": "ada@example.org",
        "userAttributes.given_name": "Ada",
        "userAttributes.family_name": "Lovelace",
    }


def test_register_with_expired_session(client: TestClient, cognito_client: FakeCognitoClient):
    cognito_client.error = make_client_error(
        "NotAuthorizedException", "Invalid session for the user, session is expired.", "RespondToAuthChallenge"
    )

    response = client.post(
        "/auth/register",
        data={
            "session": "stale",
            "newPassword": "a-better-password",
            "username": "ada@example.org",
            "firstName": "Ada",
            "lastName": "Lovelace",
        },
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "NotAuthorizedException"


def test_unconfigured_pool_is_reported_without_calling_cognito():
    cognito_client = FakeCognitoClient()
    delegate = CognitoIdentityDelegate(cognito_client, user_pool_id=None, client_id=None)

    with pytest.raises(IdentityProviderError) as exc_info:
        delegate.authenticate("ada@example.org", "hunter22")

    assert exc_info.value.code == "IdentityProviderUnavailable"
    assert cognito_client.calls == []


def test_malformed_id_token_is_an_identity_provider_error():
    cognito_client = FakeCognitoClient()
    cognito_client.id_token = "not-a-jwt"
    delegate = CognitoIdentityDelegate(cognito_client, TEST_USER_POOL_ID, TEST_CLIENT_ID)

    with pytest.raises(IdentityProviderError) as exc_info:
        delegate.authenticate("ada@example.org", "hunter22")

    assert exc_info.value.code == "InvalidIdToken"
