import json
import logging
import time
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from uuid import UUID
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwe
from jose.constants import ALGORITHMS
from jose.exceptions import JWEError
from pydantic import ValidationError
from config.setting import settings
from schema.auth import CallerContext
from util.enum import UserRole
from util.gen import derive_key_from_string
import error

logger = logging.getLogger(__name__)

bearerschema = HTTPBearer(auto_error=False)


def json_default_serializer(obj):
    """
    Custom JSON serializer for objects not serializable by default json code.
    Specifically handles UUID and datetime objects.
    """
    if isinstance(obj, UUID):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {obj.__class__.__name__} is not JSON serializable")


class TokenManager:
    """Encrypts and decrypts session tokens issued by the auth provider"""

    @staticmethod
    def create_access_token(
        data: Dict[str, Any], expires_in_minutes: int = 60 * 24
    ) -> str:
        """
        Create an encrypted (JWE) session token
        """
        try:
            payload = data.copy()
            expiration_dt = datetime.now() + timedelta(minutes=expires_in_minutes)
            payload.update({"exp": int(expiration_dt.timestamp())})
            payload_bytes = json.dumps(payload, default=json_default_serializer).encode(
                "utf-8"
            )
            key_value = derive_key_from_string(settings.SECRET_KEY, 16)
            encrypted_jwe_bytes = jwe.encrypt(
                plaintext=payload_bytes,
                key=key_value,
                algorithm=ALGORITHMS.A128KW,
                encryption=ALGORITHMS.A128CBC_HS256,
            )
            return encrypted_jwe_bytes.decode("utf-8")

        except (TypeError, ValueError, JWEError) as e:
            logger.error(f"Token encryption failed: {e}")
            raise error.ServerError("Could not create session token")

    @staticmethod
    def decode_token(token: str, check_expiry: bool = True) -> Dict[str, Any]:
        """
        Decrypts a JWE compact token string and returns the original payload.
        Optionally checks the 'exp' field against the current time.
        """
        try:
            key_value = derive_key_from_string(settings.SECRET_KEY, 16)
            decrypted_bytes = jwe.decrypt(token, key_value)
            decrypted_data = json.loads(decrypted_bytes.decode("utf-8"))
        except Exception as e:
            raise error.AuthenticationError(f"Invalid token: {e}")

        if check_expiry and "exp" in decrypted_data:
            current_time = int(time.time())
            expiry_time = decrypted_data["exp"]
            if current_time > expiry_time:
                raise error.AuthenticationError(
                    f"Token expired at {datetime.fromtimestamp(expiry_time)}"
                )

        return decrypted_data


def get_caller_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearerschema),
) -> Optional[CallerContext]:
    """
    Resolve the caller of the current request from the session cookie
    or the bearer header. Anonymous callers resolve to None.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token and credentials:
        token = credentials.credentials
    if not token:
        return None

    try:
        payload = TokenManager.decode_token(token)
        return CallerContext(**payload)
    except (error.AuthenticationError, ValidationError) as e:
        logger.info(f"Ignoring unusable session token: {e}")
        return None


def require_role(role: UserRole):
    """Build a dependency that only lets callers holding `role` through"""

    def guard(
        caller: Optional[CallerContext] = Depends(get_caller_context),
    ) -> CallerContext:
        if caller is None or caller.role != role.value:
            logger.warning(
                f"Denied {role.value} access to "
                f"{caller.user_id if caller else 'anonymous caller'}"
            )
            raise error.AuthorizationError()
        return caller

    return guard


require_admin = require_role(UserRole.admin)


def session_cookie_options(request: Request) -> Dict[str, Any]:
    """Options the session cookie is set with, needed again to clear it"""
    forwarded_proto = request.headers.get("x-forwarded-proto", "")
    secure = request.url.scheme == "https" or forwarded_proto.split(",")[0].strip() == "https"
    return {
        "path": "/",
        "httponly": True,
        "secure": secure,
        "samesite": "none" if secure else "lax",
    }
