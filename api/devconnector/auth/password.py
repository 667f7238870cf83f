"""Password hashing with bcrypt via passlib."""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _truncate_for_bcrypt(password: str) -> str:
    """Cut the password to bcrypt's 72-byte input limit without splitting a character."""
    return password.encode("utf-8")[:72].decode("utf-8", "ignore")


def hash_password(password: str) -> str:
    """Hash a plaintext password."""
    return pwd_context.hash(_truncate_for_bcrypt(password))


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    return pwd_context.verify(_truncate_for_bcrypt(password), password_hash)
