"""Credential verification adapters."""

from .static_password_verifier import StaticPasswordVerifier

__all__ = ["StaticPasswordVerifier"]
