# main.py
import logging
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from core.config import get_settings
from core.database import get_client
from core.startup import ensure_indexes
from auth.routes.auth_router import auth_router
from user.routes.user_router import user_router
from profiles.routes.profile_router import profile_router


BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

cfg = get_settings()
logging.basicConfig(
    level=cfg.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("devconnector")

app = FastAPI(title="DevConnector API")

app.include_router(auth_router, prefix="/api")
app.include_router(user_router, prefix="/api")
app.include_router(profile_router, prefix="/api")

origins = cfg.BACKEND_CORS_ORIGINS if cfg.BACKEND_CORS_ORIGINS else [
    "http://localhost:8501"]
if isinstance(origins, str):
    origins = [origins]

app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o).rstrip("/") for o in origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PyMongoError)
async def database_error(request: Request, exc: PyMongoError):
    logger.exception("Database error on %s %s",
                     request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.on_event("startup")
async def startup():
    db = get_client().get_default_database()
    try:
        await db.command("ping")
        await ensure_indexes(db)
        logger.info("Mongo OK (startup), indexes ready")
    except PyMongoError as e:
        # do not block boot when the DB is down
        logger.warning("Mongo not available at startup: %s", e)


@app.get("/health")
async def health():
    return {"status": "ok", "env": cfg.ENVIRONMENT, "db": cfg.MONGO_DATABASE}
