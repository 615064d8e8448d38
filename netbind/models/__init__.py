"""Pydantic models for structured output."""

from netbind.models.network_models import (
    InterfaceAssociation,
    InterfaceHandle,
    NetworkAddress,
)

__all__ = [
    "InterfaceAssociation",
    "InterfaceHandle",
    "NetworkAddress",
]
