"""
Comment Handlers - append-only comments on recipes
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from core.errors import NotFoundError
from database.mongo import comments_collection, recipe_collection
from models.comment_model import CommentIn, CommentOut
from utils.recipe_handlers import author_out, load_usernames, validate_object_id

logger = logging.getLogger(__name__)


def to_out(doc: Dict[str, Any], author: Dict[str, Any] = None) -> CommentOut:
    return CommentOut(
        id=str(doc["_id"]),
        recipe=str(doc["recipe"]),
        author=author_out(author),
        content=doc["content"],
        created_at=doc["created_at"],
    )


async def add_comment_handler(payload: CommentIn, user: Dict[str, Any]) -> CommentOut:
    recipe_oid = validate_object_id(payload.recipe_id, "recipe ID")

    recipe = await recipe_collection().find_one({"_id": recipe_oid}, {"_id": 1})
    if not recipe:
        raise NotFoundError("Recipe not found")

    doc = {
        "recipe": recipe_oid,
        "author": user["_id"],
        "content": payload.content,
        "created_at": datetime.now(timezone.utc),
    }
    res = await comments_collection().insert_one(doc)
    doc["_id"] = res.inserted_id

    await recipe_collection().update_one(
        {"_id": recipe_oid},
        {"$push": {"comments": res.inserted_id}},
    )
    logger.info(f"Comment {res.inserted_id} added to recipe {payload.recipe_id}")

    return to_out(doc, user)


async def list_comments_handler(recipe_id: str) -> List[CommentOut]:
    """
    All comments of a recipe, newest first
    """
    recipe_oid = validate_object_id(recipe_id, "recipe ID")

    cursor = comments_collection().find({"recipe": recipe_oid}, sort=[("created_at", -1), ("_id", -1)])
    comments = await cursor.to_list(length=None)

    users = await load_usernames(c["author"] for c in comments if c.get("author"))
    return [to_out(c, users.get(c.get("author"))) for c in comments]
