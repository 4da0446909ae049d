from __future__ import annotations

from pydantic import BaseModel


class GoogleIdTokenParams(BaseModel):
    id_token: str | None = None


class GoogleSignInRequest(BaseModel):
    auth: GoogleIdTokenParams | None = None


class AuthUserResponse(BaseModel):
    id: str
    email: str
    name: str
    avatar_url: str | None


class SignInResponse(BaseModel):
    token: str
    user: AuthUserResponse
