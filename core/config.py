"""
Application settings - read once from the environment (.env supported)
"""
import os
from dotenv import load_dotenv

load_dotenv()

DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ==== MongoDB ====
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DATABASE_NAME", "recipe_share")
MONGODB_TLS = os.getenv("MONGODB_TLS", "False").lower() == "true"

# ==== JWT ====
SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")  # override in production
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# ==== Passwords ====
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# ==== Recipes ====
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

# ==== CORS ====
FRONTEND_URL = os.getenv("FRONTEND_URL")
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8000",
]
if FRONTEND_URL:
    ALLOWED_ORIGINS.append(FRONTEND_URL.rstrip("/"))
