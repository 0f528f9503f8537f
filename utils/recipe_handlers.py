"""
Recipe Route Handlers - create, fetch and list recipes
All recipe-related route handlers consolidated here
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId

from core.errors import InvalidInputError, NotFoundError
from database.mongo import recipe_collection, users_collection, ratings_collection, comments_collection
from models.recipe_model import RecipeIn, RecipeOut, RecipePageOut
from utils.recipe_query import RECIPE_SORT, build_recipe_filter, page_window, total_pages

logger = logging.getLogger(__name__)


# ==================== HELPER FUNCTIONS ====================

def validate_object_id(object_id: str, field_name: str = "ID") -> ObjectId:
    """
    Validate and convert string to ObjectId
    """
    if not object_id or not isinstance(object_id, str):
        raise InvalidInputError(f"Invalid {field_name}")

    if not ObjectId.is_valid(object_id):
        raise InvalidInputError(f"Invalid {field_name} format")

    return ObjectId(object_id)


def author_out(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, str]]:
    if not user:
        return None
    return {"id": str(user["_id"]), "username": user.get("username", "")}


async def load_usernames(user_ids: Iterable[ObjectId]) -> Dict[ObjectId, Dict[str, Any]]:
    ids = list(set(user_ids))
    if not ids:
        return {}
    cursor = users_collection().find({"_id": {"$in": ids}}, {"username": 1})
    return {u["_id"]: u async for u in cursor}


async def populate_recipes(recipes: List[Dict[str, Any]]) -> List[RecipeOut]:
    """
    Resolve author, rating values and comments (with their authors) for a batch of recipe documents
    """
    if not recipes:
        return []

    rating_ids = [rid for r in recipes for rid in r.get("ratings", [])]
    comment_ids = [cid for r in recipes for cid in r.get("comments", [])]

    ratings_by_id: Dict[ObjectId, Dict[str, Any]] = {}
    if rating_ids:
        cursor = ratings_collection().find({"_id": {"$in": rating_ids}}, {"value": 1})
        ratings_by_id = {doc["_id"]: doc async for doc in cursor}

    comments_by_id: Dict[ObjectId, Dict[str, Any]] = {}
    if comment_ids:
        cursor = comments_collection().find({"_id": {"$in": comment_ids}}, {"content": 1, "author": 1})
        comments_by_id = {doc["_id"]: doc async for doc in cursor}

    users = await load_usernames(
        [r["author"] for r in recipes if r.get("author")]
        + [c["author"] for c in comments_by_id.values() if c.get("author")]
    )

    out = []
    for recipe in recipes:
        ratings = [
            {"id": str(rid), "value": ratings_by_id[rid]["value"]}
            for rid in recipe.get("ratings", [])
            if rid in ratings_by_id
        ]
        comments = [
            {
                "id": str(cid),
                "content": comments_by_id[cid]["content"],
                "author": author_out(users.get(comments_by_id[cid].get("author"))),
            }
            for cid in recipe.get("comments", [])
            if cid in comments_by_id
        ]
        out.append(RecipeOut(
            id=str(recipe["_id"]),
            title=recipe["title"],
            ingredients=recipe.get("ingredients", []),
            steps=recipe.get("steps", []),
            image=recipe.get("image"),
            author=author_out(users.get(recipe.get("author"))),
            ratings=ratings,
            comments=comments,
            average_rating=float(recipe.get("average_rating") or 0.0),
            preparation_time=recipe["preparation_time"],
            created_at=recipe.get("created_at"),
            updated_at=recipe.get("updated_at"),
        ))
    return out


# ==================== RECIPE HANDLERS ====================

async def create_recipe_handler(recipe: RecipeIn, user: Dict[str, Any]) -> RecipeOut:
    """
    Create a recipe owned by the authenticated user
    """
    now = datetime.now(timezone.utc)
    recipe_doc = {
        "title": recipe.title,
        "ingredients": recipe.ingredients,
        "steps": recipe.steps,
        "image": str(recipe.image) if recipe.image else None,
        "preparation_time": recipe.preparation_time,
        "author": user["_id"],
        "ratings": [],
        "comments": [],
        "average_rating": 0.0,
        "created_at": now,
        "updated_at": now,
    }

    result = await recipe_collection().insert_one(recipe_doc)
    recipe_doc["_id"] = result.inserted_id
    logger.info(f"Recipe {result.inserted_id} created by {user.get('username')}")

    return (await populate_recipes([recipe_doc]))[0]


async def get_recipe_handler(recipe_id: str) -> RecipeOut:
    """
    Fetch one recipe by id, fully populated
    """
    recipe_oid = validate_object_id(recipe_id, "recipe ID")

    recipe = await recipe_collection().find_one({"_id": recipe_oid})
    if not recipe:
        raise NotFoundError("Recipe not found")

    return (await populate_recipes([recipe]))[0]


async def list_recipes_handler(
    search: Optional[str] = None,
    rating: Optional[float] = None,
    preparation_time: Optional[float] = None,
    page: int = 1,
    limit: int = 10,
) -> RecipePageOut:
    """
    Filtered, paginated recipe listing
    """
    current_page, skip = page_window(page, limit)
    query = build_recipe_filter(search, rating, preparation_time)

    cursor = recipe_collection().find(query, sort=RECIPE_SORT, skip=skip, limit=limit)
    recipes = await cursor.to_list(length=limit)
    total = await recipe_collection().count_documents(query)

    return RecipePageOut(
        recipes=await populate_recipes(recipes),
        total_pages=total_pages(total, limit),
        current_page=current_page,
    )
