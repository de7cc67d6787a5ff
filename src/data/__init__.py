"""Data layer - Use case implementations over domain ports."""

from src.data.usecases.db_add_account import DbAddAccount

__all__ = ["DbAddAccount"]
