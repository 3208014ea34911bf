"""Shared pytest fixtures."""

import pytest

from addressbook.contacts import AddressBook
from addressbook.domain import Contact
from addressbook.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables the address book reads."""
    for name in ("ADDRESSBOOK_FILE", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def alice():
    return Contact(name="Alice Tan", phone="91234567", email="alice@example.com")


@pytest.fixture
def bob():
    return Contact(name="Bob Lee", phone="87654321")


@pytest.fixture
def address_book(alice, bob):
    """Address book with Alice Tan and Bob Lee, in that order."""
    return AddressBook([alice, bob])


@pytest.fixture
def contacts_file(tmp_path):
    """A valid YAML contacts file with three entries."""
    path = tmp_path / "addressbook.yaml"
    path.write_text(
        """
contacts:
  - name: Alice Tan
    phone: "91234567"
    email: alice@example.com
    tags: [friends]
  - name: Bob Lee
    phone: "87654321"
  - name: Ann Lee
"""
    )
    return path
