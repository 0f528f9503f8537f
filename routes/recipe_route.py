"""
Recipe Management Routes - Simplified Main Router
All handlers live in utils.recipe_handlers / utils.rating_handlers
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.auth.dependencies import get_current_user
from core.config import DEFAULT_PAGE_SIZE
from models.rating_model import RatingRequest, RatingResultOut
from models.recipe_model import RecipeIn, RecipeOut, RecipePageOut
from utils.rating_handlers import rate_recipe_handler
from utils.recipe_handlers import create_recipe_handler, get_recipe_handler, list_recipes_handler

router = APIRouter()

# ==================== RECIPE ROUTES ====================
@router.post("", response_model=RecipeOut, status_code=201)
async def create_recipe(recipe: RecipeIn, user=Depends(get_current_user)):
    return await create_recipe_handler(recipe, user)


@router.get("", response_model=RecipePageOut)
async def get_recipes(
    search: Optional[str] = Query(None, description="Substring of the title or of an ingredient"),
    rating: Optional[float] = Query(None, description="Minimum average rating"),
    preparation_time: Optional[float] = Query(None, alias="preparationTime", description="Maximum preparation time (minutes)"),
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
):
    return await list_recipes_handler(search, rating, preparation_time, page, limit)


@router.get("/{recipe_id}", response_model=RecipeOut)
async def get_recipe(recipe_id: str):
    return await get_recipe_handler(recipe_id)


@router.post("/{recipe_id}/rate", response_model=RatingResultOut)
async def rate_recipe(recipe_id: str, payload: RatingRequest, user=Depends(get_current_user)):
    return await rate_recipe_handler(recipe_id, payload.value, user)
