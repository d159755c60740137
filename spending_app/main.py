"""
FastAPI Main Application
Beer vs Gym spending tracker
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from spending_app.config import settings
from spending_app.core.logging import setup_logging
from spending_app.infrastructure.db.database import init_db, close_db
from spending_app.api.routes import health, spending

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Opens and closes the database
    """
    logger.info("🚀 Starting Spending Tracker")
    logger.info(f"   Environment: {settings.APP_ENV}")
    logger.info(f"   Database: {settings.DATABASE_URL}")

    await init_db()
    logger.info("✅ Database initialized")
    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"   ✅ API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")

    yield

    logger.info("🛑 Shutting down Spending Tracker...")
    await close_db()
    logger.info("✅ Database connections closed")


# Create FastAPI app
app = FastAPI(
    title="Beer vs Gym Spending Tracker",
    description="Log Beer and Gym expenses and find out which one wins",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "🍺 vs 💪 Spending Tracker",
        "version": "1.0.0",
        "categories": ["Beer", "Gym"],
        "docs": "/docs"
    }


app.include_router(health.router, tags=["Health"])
app.include_router(spending.router, prefix="/api/v1/spending", tags=["Spending"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("spending_app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
