import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from storefront.core.config import settings

logger = logging.getLogger(__name__)

# CryptContext handles password hashing using bcrypt
# bcrypt generates a new salt per hash and stores it inside the hash string
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash using constant-time comparison"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError, TypeError):
        # A corrupt stored hash never counts as a match
        logger.warning("Stored password hash could not be parsed")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT carrying the given claims.

    An ``exp`` claim is added from ``expires_delta`` or, failing that, from
    ACCESS_TOKEN_EXPIRE_MINUTES. With neither set the token never expires.
    """
    to_encode = data.copy()

    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and verify a JWT token.

    Returns None when the token is malformed, tampered with, expired, or
    signed with anything other than the configured algorithm.
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        return None

    # Unsigned tokens are refused before the signature is even looked at
    algorithm = header.get("alg")
    if not isinstance(algorithm, str) or algorithm.lower() == "none" or algorithm != settings.ALGORITHM:
        logger.warning(f"Rejected token signed with algorithm {algorithm!r}")
        return None

    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
