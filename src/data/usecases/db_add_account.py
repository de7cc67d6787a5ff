"""
Add-account use case - Hashes the password and persists the account.

Implements the domain's AddAccount port on top of the Encrypter and
AddAccountRepository ports. Collaborators are awaited strictly in order
and their errors propagate unchanged to the caller.
"""

import logging
from dataclasses import dataclass, replace

from src.domain.models import AccountModel, AddAccountModel
from src.domain.ports import AddAccountRepository, Encrypter

logger = logging.getLogger(__name__)


@dataclass
class DbAddAccount:
    """
    Implements AddAccount protocol via an encrypter and a repository.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    encrypter: Encrypter
    add_account_repository: AddAccountRepository

    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Create a new account with a hashed password.

        Args:
            account: Sign-up fields with the plaintext password

        Returns:
            The stored account as returned by the repository
        """
        hashed_password = await self.encrypter.encrypt(account.password)
        created = await self.add_account_repository.add(
            replace(account, password=hashed_password)
        )
        logger.info("Account created: %s", created.id)
        return created
