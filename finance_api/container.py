"""
Name: Dependency Injection Container

Responsibilities:
  - Wire up repositories, identity services and use cases
  - Choose the persistence backend (postgres | memory) from settings
  - Expose one instance per use case for the HTTP routers

Collaborators:
  - infrastructure.repositories: Postgres* / InMemory* implementations
  - identity: Argon2PasswordHasher, JWTTokenService
  - application.usecases: every use case of the API
  - api/main.py: builds the container in the lifespan and stores it in app.state

Constraints:
  - Manual DI (no library like dependency-injector)
  - The postgres backend needs an opened `Database` handle (no module-level pool)

Notes:
  - This is the composition root (where dependencies are wired)
  - Use cases only see domain ports; tests can build a container with fakes
"""

from __future__ import annotations

from typing import Optional

from .application.usecases import (
    ChangeUserPasswordUseCase,
    CreateAccountUseCase,
    CreateTransactionUseCase,
    CreateUserUseCase,
    DeleteAccountUseCase,
    DeleteTransactionUseCase,
    DeleteUserUseCase,
    GetAccountUseCase,
    GetTransactionUseCase,
    ListAccountsUseCase,
    ListTransactionsUseCase,
    ListUsersUseCase,
    LoginUseCase,
    RefreshTokenUseCase,
    ShowUserUseCase,
    UpdateAccountUseCase,
    UpdateTransactionUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import Settings
from .domain.repositories import (
    AccountRepository,
    TransactionRepository,
    UserAccountRepository,
    UserRepository,
)
from .domain.services import PasswordHasher, TokenService
from .identity.passwords import Argon2PasswordHasher
from .identity.tokens import JWTTokenService
from .infrastructure.db.pool import Database
from .infrastructure.repositories.in_memory import (
    InMemoryAccountRepository,
    InMemoryStore,
    InMemoryTransactionRepository,
    InMemoryUserAccountRepository,
    InMemoryUserRepository,
)
from .infrastructure.repositories.postgres import (
    PostgresAccountRepository,
    PostgresTransactionRepository,
    PostgresUserAccountRepository,
    PostgresUserRepository,
)


class Container:
    def __init__(
        self,
        *,
        users: UserRepository,
        accounts: AccountRepository,
        user_accounts: UserAccountRepository,
        transactions: TransactionRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self.users = users
        self.accounts = accounts
        self.user_accounts = user_accounts
        self.transactions = transactions
        self.hasher = hasher
        self.token_service = token_service

        # R: Users
        self.create_user = CreateUserUseCase(users, hasher)
        self.list_users = ListUsersUseCase(users)
        self.show_user = ShowUserUseCase(users)
        self.update_user = UpdateUserUseCase(users)
        self.delete_user = DeleteUserUseCase(users)
        self.change_user_password = ChangeUserPasswordUseCase(users, hasher)

        # R: Accounts
        self.create_account = CreateAccountUseCase(accounts, users, user_accounts)
        self.list_accounts = ListAccountsUseCase(accounts)
        self.get_account = GetAccountUseCase(accounts)
        self.update_account = UpdateAccountUseCase(accounts)
        self.delete_account = DeleteAccountUseCase(accounts)

        # R: Transactions
        self.create_transaction = CreateTransactionUseCase(transactions, accounts)
        self.list_transactions = ListTransactionsUseCase(transactions, accounts)
        self.get_transaction = GetTransactionUseCase(transactions, accounts)
        self.update_transaction = UpdateTransactionUseCase(transactions, accounts)
        self.delete_transaction = DeleteTransactionUseCase(transactions, accounts)

        # R: Session
        self.login = LoginUseCase(users, hasher, token_service)
        self.refresh_token = RefreshTokenUseCase(token_service)

    @classmethod
    def in_memory(
        cls,
        settings: Settings,
        *,
        store: Optional[InMemoryStore] = None,
        hasher: Optional[PasswordHasher] = None,
    ) -> "Container":
        """R: Backend en memoria (tests / dev local sin Postgres)."""
        store = store or InMemoryStore()
        return cls(
            users=InMemoryUserRepository(store),
            accounts=InMemoryAccountRepository(store),
            user_accounts=InMemoryUserAccountRepository(store),
            transactions=InMemoryTransactionRepository(store),
            hasher=hasher or Argon2PasswordHasher(),
            token_service=JWTTokenService.from_settings(settings),
        )

    @classmethod
    def postgres(cls, settings: Settings, db: Database) -> "Container":
        """R: Backend Postgres; `db` debe estar abierto antes del primer request."""
        return cls(
            users=PostgresUserRepository(db),
            accounts=PostgresAccountRepository(db),
            user_accounts=PostgresUserAccountRepository(db),
            transactions=PostgresTransactionRepository(db),
            hasher=Argon2PasswordHasher(),
            token_service=JWTTokenService.from_settings(settings),
        )
