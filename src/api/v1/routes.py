"""
API v1 routes.

Defines REST endpoints for the Sign-up API.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_controller
from src.api.models import ErrorResponse, SignUpResponse
from src.domain.models import AccountView
from src.presentation.errors import PresentationError
from src.presentation.protocols import Controller, HttpRequest, HttpResponse

router = APIRouter(tags=["v1"])


def to_json_response(response: HttpResponse) -> JSONResponse:
    """Serialize a controller HttpResponse into a FastAPI JSONResponse."""
    body = response.body
    if isinstance(body, PresentationError):
        content = ErrorResponse(
            error=body.name, message=body.message, param=body.param_name
        ).model_dump()
    elif isinstance(body, AccountView):
        content = SignUpResponse(id=body.id, name=body.name, email=body.email).model_dump()
    else:
        content = body
    return JSONResponse(status_code=response.status_code, content=content)


@router.post(
    "/signup",
    response_model=SignUpResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid param"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new account",
    description="Submit name, email, password and passwordConfirmation "
    "to create an account.",
)
async def signup(
    payload: Any = Body(default=None),
    controller: Controller = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create a new account.

    - **name**: Display name
    - **email**: Valid email address
    - **password**: Plaintext password (stored hashed)
    - **passwordConfirmation**: Must equal password

    Returns the created account without its password.
    """
    body = payload if isinstance(payload, dict) else {}
    response = await controller.handle(HttpRequest(body=body))
    return to_json_response(response)
