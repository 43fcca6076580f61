"""
GitHub OAuth endpoint: exchange an authorization code for an access token.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.services.github import GitHubOAuthError, exchange_code_for_token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


class OAuthCodeRequest(BaseModel):
    code: str | None = None


class OAuthTokenResponse(BaseModel):
    access_token: str


@router.post("/github", response_model=OAuthTokenResponse)
async def exchange_github_code(data: OAuthCodeRequest | None = None) -> OAuthTokenResponse:
    """
    Exchange the code from GitHub's OAuth redirect for an access token.

    The token is returned to the client, which stores it; the server keeps
    nothing.
    """
    code = data.code if data else None
    try:
        access_token = await exchange_code_for_token(code or "")
    except GitHubOAuthError as e:
        raise HTTPException(status_code=e.status_code or 502, detail=e.message) from None

    return OAuthTokenResponse(access_token=access_token)
