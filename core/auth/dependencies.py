"""
Bearer token authentication dependencies
Centralized auth logic for all routes
"""
import logging
from fastapi import Request
from bson import ObjectId
from typing import Dict, Any, Optional

from core.auth.jwt_handler import decode_access_token
from core.errors import UnauthenticatedError
from database.mongo import users_collection

logger = logging.getLogger(__name__)


def extract_bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    token = auth_header.split(" ", 1)[1].strip()
    return token or None


async def get_current_user(request: Request) -> Dict[str, Any]:
    """
    Verify the bearer token and return the user document (without password hash)
    """
    token = extract_bearer_token(request)
    if not token:
        raise UnauthenticatedError("Not authorized, no token")

    user_id = decode_access_token(token)
    if not user_id or not ObjectId.is_valid(user_id):
        logger.info("Rejected bearer token: verification failed")
        raise UnauthenticatedError("Not authorized, token failed")

    user = await users_collection().find_one(
        {"_id": ObjectId(user_id)},
        {"password_hash": 0},
    )
    if not user:
        logger.info(f"Rejected bearer token: user {user_id} no longer exists")
        raise UnauthenticatedError("Not authorized, token failed")
    return user

