"""
Sign-up controller - Validates sign-up requests and creates accounts.

Check order is fixed and short-circuits at the first failure:

1. Required fields present (name, email, password, passwordConfirmation)
   and holding strings
2. password == passwordConfirmation
3. Password no longer than 72 bytes (UTF-8)
4. Email format accepted by the injected EmailValidator
5. Account created through the injected AddAccount use case

Any exception raised along the way becomes a 500 with a ServerError body;
handle() itself never raises.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from src.domain.models import AccountView, AddAccountModel
from src.domain.ports import AddAccount, EmailValidator
from src.presentation.errors import InvalidParamError, MissingParamError
from src.presentation.helpers import bad_request, ok, server_error
from src.presentation.protocols import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


@dataclass
class SignUpController:
    """
    Handles POST sign-up requests.

    Collaborators are injected once and reused for every request; the
    controller itself keeps no state between calls.
    """

    email_validator: EmailValidator
    add_account: AddAccount

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """
        Run the sign-up checks and create the account.

        Args:
            request: HttpRequest whose body holds the sign-up fields

        Returns:
            200 with the created AccountView, 400 with a MissingParamError
            or InvalidParamError, or 500 with a ServerError
        """
        try:
            body = request.body if isinstance(request.body, Mapping) else {}

            for field_name in REQUIRED_FIELDS:
                value = body.get(field_name)
                if not value:
                    return bad_request(MissingParamError(field_name))
                if not isinstance(value, str):
                    return bad_request(InvalidParamError(field_name))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                return bad_request(InvalidParamError("passwordConfirmation"))

            if len(password.encode()) > MAX_PASSWORD_BYTES:
                return bad_request(InvalidParamError("password"))

            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            account = await self.add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
            return ok(AccountView.from_account(account))
        except Exception:
            logger.exception("Unexpected error while handling sign-up")
            return server_error()
