"""
Rating Handlers - one rating per (recipe, user), cached average on the recipe
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from core.errors import InvalidInputError, NotFoundError
from database.mongo import recipe_collection, ratings_collection
from models.rating_model import RatingResultOut
from utils.keyed_lock import KeyedLock
from utils.recipe_handlers import validate_object_id

logger = logging.getLogger(__name__)

# Serializes the rating upsert + average recompute per recipe
recipe_locks = KeyedLock()


def validate_rating(value: int) -> int:
    """
    Validate rating is between 1-5 stars
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1 or value > 5:
        raise InvalidInputError("Rating must be between 1 and 5 stars")
    return value


async def upsert_rating(recipe_oid: ObjectId, user_oid: ObjectId, value: int) -> None:
    now = datetime.now(timezone.utc)
    updated = await ratings_collection().update_one(
        {"recipe": recipe_oid, "user": user_oid},
        {"$set": {"value": value, "updated_at": now}},
    )
    if updated.matched_count:
        return

    try:
        result = await ratings_collection().insert_one({
            "recipe": recipe_oid,
            "user": user_oid,
            "value": value,
            "created_at": now,
            "updated_at": now,
        })
    except DuplicateKeyError:
        # Another request inserted this user's rating first
        await ratings_collection().update_one(
            {"recipe": recipe_oid, "user": user_oid},
            {"$set": {"value": value, "updated_at": now}},
        )
        return

    await recipe_collection().update_one(
        {"_id": recipe_oid},
        {"$addToSet": {"ratings": result.inserted_id}},
    )


async def recalc_recipe_rating(recipe_oid: ObjectId) -> float:
    """
    Recompute and store the mean of all rating values for a recipe (0 when unrated)
    """
    pipeline = [
        {"$match": {"recipe": recipe_oid}},
        {"$group": {"_id": "$recipe", "count": {"$sum": 1}, "avg": {"$avg": "$value"}}},
    ]
    stats = await ratings_collection().aggregate(pipeline).to_list(length=1)
    average = float(stats[0]["avg"]) if stats else 0.0

    await recipe_collection().update_one(
        {"_id": recipe_oid},
        {"$set": {"average_rating": average, "updated_at": datetime.now(timezone.utc)}},
    )
    return average


async def rate_recipe_handler(recipe_id: str, value: int, user: Dict[str, Any]) -> RatingResultOut:
    """
    Create or update the caller's rating and return the new average
    """
    validated_value = validate_rating(value)
    recipe_oid = validate_object_id(recipe_id, "recipe ID")

    recipe = await recipe_collection().find_one({"_id": recipe_oid}, {"_id": 1})
    if not recipe:
        raise NotFoundError("Recipe not found")

    async with recipe_locks.hold(recipe_oid):
        await upsert_rating(recipe_oid, user["_id"], validated_value)
        average = await recalc_recipe_rating(recipe_oid)

    logger.info(f"Recipe {recipe_id} rated {validated_value} by {user.get('username')}, average now {average}")
    return RatingResultOut(average_rating=average)
