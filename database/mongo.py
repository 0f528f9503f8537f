import logging
import motor.motor_asyncio

from core.config import MONGODB_URI, DB_NAME, MONGODB_TLS

logger = logging.getLogger(__name__)

# ASYNC MongoDB client (Motor) - created on first use
_client = None


def get_client():
    global _client
    if _client is None:
        _client = motor.motor_asyncio.AsyncIOMotorClient(
            MONGODB_URI,
            tls=MONGODB_TLS,
            serverSelectionTimeoutMS=30000,
        )
    return _client


def set_client(client) -> None:
    """Swap the Motor client (tests plug an in-memory client in here)."""
    global _client
    _client = client


def get_db():
    return get_client()[DB_NAME]


# Core collections (ALL ASYNC)
def users_collection():
    return get_db()["users"]


def recipe_collection():
    return get_db()["recipes"]


def ratings_collection():
    return get_db()["ratings"]


def comments_collection():
    return get_db()["comments"]


async def ensure_indexes():
    """
    Create indexes backing the uniqueness rules and the recipe filters
    """
    try:
        await users_collection().create_index("username", unique=True)
        await users_collection().create_index("email", unique=True)

        # One rating per (recipe, user)
        await ratings_collection().create_index([("recipe", 1), ("user", 1)], unique=True)

        await recipe_collection().create_index("author")
        await recipe_collection().create_index("average_rating")
        await recipe_collection().create_index("preparation_time")

        await comments_collection().create_index([("recipe", 1), ("created_at", -1)])

        logger.info("✅ Indexes created successfully")
    except Exception as e:
        logger.warning(f"⚠️ Index creation failed (may already exist): {e}")
