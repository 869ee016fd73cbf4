from typing import Any, Dict

from fastapi import APIRouter, Depends, Form

from archive_api.dependencies import get_identity_delegate
from archive_api.identity import CognitoIdentityDelegate

router = APIRouter()


@router.post("/signin")
async def sign_in(
    email: str = Form(...),
    password: str = Form(...),
    identity: CognitoIdentityDelegate = Depends(get_identity_delegate),
) -> Dict[str, Any]:
    """
    Sign in against the user pool.

    Returns tokens (with decoded ID token claims), or a `NEW_PASSWORD_REQUIRED`
    challenge and its `Session` when the user has not set a password yet.
    """
    return identity.authenticate(email, password)


@router.post("/register")
async def register(
    session: str = Form(...),
    new_password: str = Form(..., alias="newPassword"),
    username: str = Form(...),
    first_name: str = Form(..., alias="firstName"),
    last_name: str = Form(..., alias="lastName"),
    identity: CognitoIdentityDelegate = Depends(get_identity_delegate),
) -> Dict[str, Any]:
    """
    Complete a first login by answering the new-password challenge.
    """
    return identity.respond_to_challenge(
        session,
        username,
        new_password,
        attributes={"given_name": first_name, "family_name": last_name},
    )
