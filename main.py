
import logging, uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import core.config as config
from app.routers import register_routers
from core.errors import setup_error_handlers
from database.session import SessionLocal
from service.admin_auth import seed_default_admin

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    db = SessionLocal()
    try:
        seed_default_admin(db)
    finally:
        db.close()
    log.info("E-MOT server ready")
    yield
    # shutdown
    log.info("E-MOT server stopped")

app = FastAPI(title="E-MOT", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_error_handlers(app)
register_routers(app)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
