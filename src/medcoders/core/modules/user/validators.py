from medcoders.errors import ValidationError

MIN_PASSWORD_LENGTH = 8


def validate_password(password: str) -> None:
    """Validate password meets requirements.

    Requirements:
    - Minimum length of 8 characters
    - Not only whitespace

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    if not password.strip():
        raise ValidationError("Password cannot be blank")


def normalize_email(email: str) -> str:
    return email.strip().lower()
