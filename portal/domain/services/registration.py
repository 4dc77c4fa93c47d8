from __future__ import annotations

from dataclasses import dataclass


MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class RegistrationData:
    name: str
    email: str
    password: str
    phone: str | None


def clean_registration(*, name: str, email: str, password: str, phone: str | None) -> RegistrationData:
    """Normaliza e valida os campos do cadastro; erros viram HTTP 400 no router."""
    name_clean = name.strip()
    email_clean = email.strip().lower()
    phone_clean = (phone or "").strip() or None

    if not name_clean:
        raise ValueError("name is required.")
    if not email_clean or "@" not in email_clean:
        raise ValueError("a valid email is required.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"password must have at least {MIN_PASSWORD_LENGTH} characters.")
    return RegistrationData(name=name_clean, email=email_clean, password=password, phone=phone_clean)
