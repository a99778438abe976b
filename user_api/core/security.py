# Standard library imports
import logging

# External package imports
import bcrypt

# Local application imports
from .config import get_settings

logger = logging.getLogger(__name__)

# bcrypt only uses the first 72 bytes of a password; newer releases raise instead
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt
    
    Passwords longer than 72 bytes are truncated to 72 bytes before
    hashing, the same input bcrypt has always consumed.
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Salted bcrypt hash string
    """
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        logger.warning(
            f"Password is {len(password_bytes)} bytes, "
            f"only the first {BCRYPT_MAX_PASSWORD_BYTES} are hashed"
        )
        password_bytes = password_bytes[:BCRYPT_MAX_PASSWORD_BYTES]
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")
