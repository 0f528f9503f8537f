import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import ALLOWED_ORIGINS, DEBUG, LOG_LEVEL
from database.mongo import ensure_indexes, get_db

# ==== Logging ====
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ==== FastAPI app ====
app = FastAPI(title="Recipe Share API", version="1.0.0")

# ==== Health Check Endpoint ====
@app.api_route("/", methods=["GET", "HEAD"])
async def root():
    """Root endpoint for health checks"""
    return {
        "status": "ok",
        "message": "Recipe Share API is running",
        "version": "1.0.0",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

@app.api_route("/health", methods=["GET", "HEAD"])
async def health_check():
    """Detailed health check endpoint"""
    try:
        await get_db().command("ping")
        mongo_status = "connected"
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {e}")
        mongo_status = "error"

    return {
        "status": "ok" if mongo_status == "connected" else "degraded",
        "services": {
            "api": "running",
            "mongodb": mongo_status,
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# ==== Startup Events ====
@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    await ensure_indexes()
    logger.info("🚀 Backend services initialized")

# Routers
from routes import recipe_route, comment_route
from routes.auth_route import auth_router
app.include_router(auth_router)
app.include_router(recipe_route.router, prefix="/recipes", tags=["Recipes"])
app.include_router(comment_route.router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==== Logging middleware ====
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}")
    return response

# ==== Error handlers ====
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed or out-of-range input is a 400, not FastAPI's default 422
    return JSONResponse(status_code=400, content=jsonable_encoder({"detail": exc.errors()}))

@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception("Unhandled error")  # log full stacktrace
    detail = str(exc) if DEBUG else "Internal server error"
    return JSONResponse(status_code=500, content={"detail": detail})
