# auth service — jwt access token validation
# tokens are issued elsewhere; this service only verifies them

import logging
from typing import Optional

from jose import JWTError, jwt
from journal_insights.config import settings

logger = logging.getLogger(__name__)


def decode_token(token: str) -> Optional[dict]:
    """decode and validate a jwt token, returns payload or none"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError as e:
        logger.warning(f"Token decode failed: {e}")
        return None
