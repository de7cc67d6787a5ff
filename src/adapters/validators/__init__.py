"""Validator adapters - Field format checks."""

from .email_validator_adapter import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
