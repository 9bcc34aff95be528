"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from canon_forge.core.config import get_settings
from canon_forge.core.logging import setup_logging

# Setup logging
logger = setup_logging("main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize services at startup. The provider is selected once, here."""
    settings = get_settings()
    try:
        from canon_forge.services.dispatch import GenerationDispatcher
        from canon_forge.services.forge import ForgeService
        from canon_forge.services.providers.factory import build_provider
        from canon_forge.services.storage import ProfileStore

        provider = build_provider(settings)
        dispatcher = GenerationDispatcher(
            provider, timeout=settings.generation_timeout_seconds
        )
        app.state.forge_service = ForgeService(dispatcher=dispatcher)
        app.state.provider_name = provider.name
        app.state.profile_store = ProfileStore(Path(settings.data_dir))
        logger.info("Services initialized with provider=%s", provider.name)
    except Exception as exc:
        logger.error(
            "Service initialization failed, running in degraded mode",
            exc_info=True,
            extra={"error_type": type(exc).__name__},
        )
        # Continue without services; endpoints return 503 until fixed

    yield


# Create FastAPI app
app = FastAPI(
    title="Canon Forge",
    description="Identity-anchored reference image generation for characters and sets",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from canon_forge.api.forge import router as forge_router  # noqa: E402

app.include_router(forge_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.image_provider` for actual status.
    """
    svc = getattr(request.app.state, "forge_service", None)
    provider = getattr(request.app.state, "provider_name", None)

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "image_provider": provider if svc is not None else "unavailable",
        },
    }
