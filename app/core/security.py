# /app/core/security.py

from passlib.context import CryptContext

from .config import PASSWORD_HASH_ROUNDS

# bcrypt only looks at the first 72 bytes of a secret; longer input is
# truncated instead of raising.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__truncate_error=False,
    bcrypt__rounds=PASSWORD_HASH_ROUNDS,
)


def hash_password(password: str) -> str:
    """Returns the one-way bcrypt hash of a plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
