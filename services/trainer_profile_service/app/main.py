"""FastAPI application for the public trainer profile page."""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from libs.common.middleware import add_observability_middleware
from libs.common.rate_limit import limiter, rate_limit_exceeded_handler
from services.trainer_profile_service.router import config_router, router


def create_app() -> FastAPI:
    """Create and configure the Trainer Profile Service FastAPI app."""
    app = FastAPI(
        title="Trainer Profile Service",
        version="0.1.0",
        description="Public trainer profile pages and invitation requests.",
    )

    # Add rate limiter state to app
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Add observability (logging + request tracing)
    add_observability_middleware(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "trainer_profile"}

    app.include_router(config_router)
    app.include_router(router)

    return app


app = create_app()
