from __future__ import annotations

import logging
from uuid import uuid4

from portal.application.dto.auth import RegisterUserInput, RegisterUserOutput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.credentials_port import PasswordHasherPort
from portal.domain.entities.user import Profile, User
from portal.domain.exceptions import EmailAlreadyExistsError
from portal.domain.services.registration import RegistrationData, clean_registration

from .auth_common import to_user_output, utcnow


logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Cria a conta do cliente: usuario com senha local e perfil sem admin."""

    def __init__(
        self,
        *,
        accounts: AccountsPort,
        password_hasher: PasswordHasherPort,
    ):
        self._accounts = accounts
        self._password_hasher = password_hasher

    def execute(self, command: RegisterUserInput) -> RegisterUserOutput:
        data = clean_registration(
            name=command.name,
            email=command.email,
            password=command.password,
            phone=command.phone,
        )
        password_hash = self._password_hasher.hash(data.password)

        output = self._accounts.execute_in_transaction(
            lambda accounts: self._create_account(accounts, data=data, password_hash=password_hash)
        )
        logger.info("register_user: created user_id=%s", output.user.id)
        return output

    def _create_account(
        self,
        accounts: AccountsPort,
        *,
        data: RegistrationData,
        password_hash: str,
    ) -> RegisterUserOutput:
        if accounts.find_user_by_email(email=data.email) is not None:
            raise EmailAlreadyExistsError("Email already in use.")

        now = utcnow()
        user = User(id=str(uuid4()), name=data.name, email=data.email, is_active=True, created_at=now, updated_at=now)
        profile = Profile(
            id=str(uuid4()),
            user_id=user.id,
            email=data.email,
            full_name=data.name,
            phone=data.phone,
            is_admin=False,
            created_at=now,
            updated_at=now,
        )
        accounts.add_user(user=user, password_hash=password_hash)
        accounts.add_profile(profile=profile)
        return RegisterUserOutput(user=to_user_output(user, profile))
