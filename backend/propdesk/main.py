"""PropDesk - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from propdesk.core.env_validation import validate_environment
from propdesk.routers import (
    dashboard_router,
    navigation_router,
    properties_router,
    tenants_router,
    vendors_router,
)
from propdesk.services import navigation

# Hard-fails (exit 1) on invalid configuration
settings = validate_environment()

logger = logging.getLogger("propdesk")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"[APP] {settings.app_name} starting; CORS origins: {settings.origins}")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Property management screens: property search, tenant onboarding, vendor directory and navigation shell. Sample data only; submissions are never stored.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API v1 routers
app.include_router(properties_router, prefix=settings.api_v1_prefix)
app.include_router(tenants_router, prefix=settings.api_v1_prefix)
app.include_router(vendors_router, prefix=settings.api_v1_prefix)
app.include_router(navigation_router, prefix=settings.api_v1_prefix)
app.include_router(dashboard_router, prefix=settings.api_v1_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Service banner with the top-level screen paths."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "api": settings.api_v1_prefix,
        "screens": {
            name: navigation.resolve(name)
            for name in ("home", "properties", "tenants", "vendors")
        },
        "docs": "/docs" if settings.debug else "Disabled in production",
    }
