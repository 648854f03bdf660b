"""Auth — login form action, current session lookup and logout.

Invariants:
    - Bad credentials answer 401 with {"message": "CredentialSignin"}
    - Successful login answers 303 to the dashboard and sets the session cookie
      (RedirectSignal handled globally)
    - No route ever returns a password hash
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import (
    get_auth_actions, get_session_registry, read_form,
)
from app.config import Settings, get_settings
from app.infrastructure.identity import SessionRegistry
from app.services.auth_actions import AuthActions

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login")
async def login(
    request: Request, actions: AuthActions = Depends(get_auth_actions),
):
    result = await actions.authenticate(None, await read_form(request))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"message": result},
    )


@router.get("/session")
async def current_session(
    request: Request,
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_settings),
):
    session = sessions.get(request.cookies.get(settings.session_cookie_name))
    if session is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": "Not signed in"},
        )
    return {"user_id": session.user_id, "email": session.email, "name": session.name}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_settings),
):
    sessions.close(request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name)
