"""
Security utilities for HMAC signing and caller identity.
"""
import hmac
import hashlib
from typing import Optional, Union

from fastapi import Header, HTTPException


def create_hmac_signature(data: Union[str, bytes], secret: str) -> str:
    """Create HMAC signature for data."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hmac.new(
        secret.encode('utf-8'),
        data,
        hashlib.sha256
    ).hexdigest()


def verify_hmac_signature(data: Union[str, bytes], signature: Optional[str], secret: str) -> bool:
    """Verify HMAC signature."""
    if not signature:
        return False
    expected_signature = create_hmac_signature(data, secret)
    return hmac.compare_digest(signature, expected_signature)


async def get_current_user_id(x_user_id: str = Header(..., alias="X-User-ID")) -> str:
    """Resolve the calling user from the X-User-ID header."""
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
