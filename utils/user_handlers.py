"""
User Route Handlers - registration and login
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from pymongo.errors import DuplicateKeyError

from core.auth.jwt_handler import create_access_token
from core.auth.passwords import hash_password, verify_password
from core.errors import ConflictError, InvalidCredentialsError
from database.mongo import users_collection
from models.user_model import LoginRequest, UserCreate

logger = logging.getLogger(__name__)


def user_helper(user: Dict[str, Any]) -> Dict[str, str]:
    """
    Public fields of a user document - never the password hash
    """
    return {
        "id": str(user["_id"]),
        "username": user.get("username", ""),
        "email": user.get("email", ""),
    }


async def register_user_handler(payload: UserCreate) -> Dict[str, Any]:
    existing = await users_collection().find_one(
        {"$or": [{"username": payload.username}, {"email": payload.email}]},
        {"_id": 1},
    )
    if existing:
        raise ConflictError()

    now = datetime.now(timezone.utc)
    user_doc = {
        "username": payload.username,
        "email": payload.email,
        "password_hash": hash_password(payload.password),
        "created_at": now,
        "updated_at": now,
    }

    try:
        result = await users_collection().insert_one(user_doc)
    except DuplicateKeyError:
        # Lost a race with a concurrent registration
        raise ConflictError()

    user_doc["_id"] = result.inserted_id
    logger.info(f"User registered: {payload.username}")
    return {"user": user_helper(user_doc)}


async def login_handler(payload: LoginRequest) -> Dict[str, Any]:
    user = await users_collection().find_one({"email": payload.email})
    if not user or not verify_password(payload.password, user.get("password_hash", "")):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()

    token = create_access_token(str(user["_id"]))
    return {"token": token, "user": user_helper(user)}
