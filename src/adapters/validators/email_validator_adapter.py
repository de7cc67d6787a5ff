"""
Email validator adapter - Implements EmailValidator protocol.

Wraps the email-validator library (the same checker pydantic's EmailStr
uses) and reduces its result to a boolean.
"""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Syntax only: no DNS lookups are performed.
    """

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
