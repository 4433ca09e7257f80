from clubhouse import utils
from clubhouse.errors import ValidationError

PASSWORD_MIN_LENGTH = 1
PASSWORD_MAX_LENGTH = 24
BCRYPT_MAX_BYTES = 72


def validate_username(username: str) -> None:
    """Validate username: 1-24 ASCII letters or digits.

    Raises:
        ValidationError: If username doesn't meet requirements
    """
    if not utils.is_username(username):
        raise ValidationError("Username must be 1-24 letters or digits")


def validate_password(password: str) -> None:
    """Validate password: 1-24 characters, any characters allowed, at most 72 UTF-8 bytes.

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise ValidationError(f"Password must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters long")

    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes when encoded")
