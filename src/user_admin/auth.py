"""Password hashing and registration token generation."""

import secrets

import bcrypt


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def generate_registration_token() -> str:
    """One-time token a newly invited user redeems to set a password (40 hex chars)."""
    return secrets.token_hex(20)
