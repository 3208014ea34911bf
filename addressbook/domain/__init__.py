"""Domain models shared across the address book."""

from .models import NAME_CONSTRAINTS, Contact, Name

__all__ = ["Contact", "Name", "NAME_CONSTRAINTS"]
