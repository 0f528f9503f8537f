"""
Authentication Routes - register, login, current user
"""
from fastapi import APIRouter, Depends

from core.auth.dependencies import get_current_user
from models.user_model import LoginRequest, LoginResponse, RegisterResponse, UserCreate, UserOut
from utils.user_handlers import login_handler, register_user_handler, user_helper

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(payload: UserCreate):
    return await register_user_handler(payload)


@auth_router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest):
    return await login_handler(payload)


@auth_router.get("/me", response_model=UserOut)
async def me(user=Depends(get_current_user)):
    return user_helper(user)
