# routes/comment_route.py
from fastapi import APIRouter, Depends
from typing import List

from core.auth.dependencies import get_current_user
from models.comment_model import CommentIn, CommentOut
from utils.comment_handlers import add_comment_handler, list_comments_handler

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.post("", response_model=CommentOut, status_code=201)
async def create_comment(payload: CommentIn, user=Depends(get_current_user)):
    return await add_comment_handler(payload, user)


@router.get("/{recipe_id}", response_model=List[CommentOut])
async def list_comments(recipe_id: str):
    return await list_comments_handler(recipe_id)
