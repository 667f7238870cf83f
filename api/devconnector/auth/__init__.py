"""Authentication utilities for the DevConnector API."""

from devconnector.auth.jwt import create_token, decode_token, get_token_user_id
from devconnector.auth.password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "create_token",
    "decode_token",
    "get_token_user_id",
]
