from __future__ import annotations

import pytest

from portal.domain.services.registration import clean_registration


def test_clean_registration_normalizes_fields():
    data = clean_registration(name="  Ana  ", email=" Ana@Example.COM ", password="12345678", phone="  ")

    assert data.name == "Ana"
    assert data.email == "ana@example.com"
    assert data.phone is None


@pytest.mark.parametrize(
    ("name", "email", "password"),
    [
        ("", "ana@example.com", "12345678"),
        ("Ana", "", "12345678"),
        ("Ana", "not-an-email", "12345678"),
        ("Ana", "ana@example.com", "1234567"),
    ],
)
def test_clean_registration_rejects_invalid_input(name, email, password):
    with pytest.raises(ValueError):
        clean_registration(name=name, email=email, password=password, phone=None)
