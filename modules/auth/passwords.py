"""
Password hashing with bcrypt.

The cost factor is the bcrypt log2 rounds; each step doubles the work an
attacker (and the server) spends per guess.
"""

import bcrypt

from .exceptions import InvalidPasswordError


def hash_password(password: str, cost: int) -> str:
    """
    Generate a salted bcrypt hash.

    Args:
        password: The plaintext password to hash
        cost: bcrypt log2 rounds (4-31)

    Returns:
        str: The encoded hash, salt and cost included

    Raises:
        InvalidPasswordError: If bcrypt refuses the input (e.g. over 72 bytes)
    """
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=cost))
    except ValueError as e:
        raise InvalidPasswordError(str(e)) from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if the password matches, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed hash or oversized password: never a match
        return False
