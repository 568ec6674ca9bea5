from typing import Optional
from fastapi import APIRouter, Depends, Request, Response
from config.setting import settings
from schema.auth import CallerContext, LogoutOut
from service.auth import get_caller_context, session_cookie_options

router = APIRouter(tags=["auth"])


@router.get("/auth/me", response_model=Optional[CallerContext])
def me(caller: Optional[CallerContext] = Depends(get_caller_context)):
    """Current caller as seen by the session token, or null"""
    return caller


@router.post("/auth/logout", response_model=LogoutOut)
def logout(request: Request, response: Response):
    """Clear the session cookie"""
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME, **session_cookie_options(request)
    )
    return LogoutOut()
