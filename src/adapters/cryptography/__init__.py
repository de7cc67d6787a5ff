"""Cryptography adapters - One-way secret hashing."""

from .bcrypt_adapter import BcryptAdapter

__all__ = ["BcryptAdapter"]
