"""Password hashing utilities (bcrypt)."""

import bcrypt

from cardiac.util.error import PasswordHashError

# bcrypt only looks at the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password (at most 72 bytes once UTF-8 encoded)
        rounds: bcrypt cost factor

    Returns:
        The bcrypt hash as text, suitable for the password_hash column
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Raises:
        PasswordHashError: If the stored hash is not a bcrypt hash
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError as e:
        raise PasswordHashError(f"Stored password hash is malformed: {e}") from e
