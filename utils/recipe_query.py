"""
Recipe Query Engine - filter construction and pagination arithmetic for GET /recipes

Results are ordered by ascending _id (insertion order) so that paging stays
consistent between calls when nobody writes in between.
"""
import math
import re
from typing import Any, Dict, Optional, Tuple

from core.errors import InvalidInputError

RECIPE_SORT = [("_id", 1)]


def build_recipe_filter(
    search: Optional[str] = None,
    rating: Optional[float] = None,
    preparation_time: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build the Mongo filter for a recipe listing.

    ``search`` is a case-insensitive substring match on the title or on any
    ingredient. ``rating`` is an inclusive lower bound on the average rating,
    ``preparation_time`` an inclusive upper bound in minutes. Clauses that were
    not asked for are left out entirely, the rest are ANDed.
    """
    query: Dict[str, Any] = {}

    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {"title": {"$regex": pattern, "$options": "i"}},
            {"ingredients": {"$regex": pattern, "$options": "i"}},
        ]

    if rating is not None:
        query["average_rating"] = {"$gte": float(rating)}

    if preparation_time is not None:
        query["preparation_time"] = {"$lte": preparation_time}

    return query


def page_window(page: Optional[int], limit: int) -> Tuple[int, int]:
    """Return (current_page, skip). Pages below 1 are treated as page 1."""
    if limit <= 0:
        raise InvalidInputError("limit must be a positive integer")
    current_page = max(1, page or 1)
    return current_page, (current_page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
