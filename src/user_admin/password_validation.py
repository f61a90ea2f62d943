"""Password strength rules for admin accounts."""

MIN_LENGTH = 8
# bcrypt ignores everything past 72 bytes
MAX_BYTES = 73


def validate_password(password: str) -> list[str]:
    """Validate password strength. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if len(password) < MIN_LENGTH:
        errors.append(f"Password must be at least {MIN_LENGTH} characters")

    if len(password.encode("utf-8")) > MAX_BYTES:
        errors.append(f"Password must be less than {MAX_BYTES} bytes")

    if not any(c.islower() for c in password):
        errors.append("Password must contain at least one lowercase character")

    if not any(c.isupper() for c in password):
        errors.append("Password must contain at least one uppercase character")

    if not any(c.isdigit() for c in password):
        errors.append("Password must contain at least one number")

    return errors
