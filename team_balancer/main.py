"""Main FastAPI application for the team balancer service."""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog

from team_balancer import __version__
from team_balancer.core.config import get_global_settings
from team_balancer.core.dependencies import close_riot_client
from team_balancer.core.exceptions import ValidationError
from team_balancer.core.logging import setup_logging
from team_balancer.core.riot_api.errors import RiotAPIError
from team_balancer.features.players.router import router as players_router
from team_balancer.features.teams.router import router as teams_router

settings = get_global_settings()
setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)


def _validate_api_key_configuration() -> None:
    """Log Riot API key configuration status."""
    if not settings.has_api_key:
        logger.warning(
            "RIOT_API_KEY not configured! Set it in the environment or .env file.",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured (development key detected)")
    else:
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up team balancer",
        region=settings.riot_region,
        platform=settings.riot_platform,
    )
    _validate_api_key_configuration()
    yield
    logger.info("Shutting down team balancer")
    await close_riot_client()


app = FastAPI(
    title="Team Balancer",
    description="Player rank scoring, role inference and custom-game team splitting on top of the Riot API.",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Client input problems are reported as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message, "context": exc.context},
    )


@app.exception_handler(RiotAPIError)
async def riot_api_error_handler(request: Request, exc: RiotAPIError) -> JSONResponse:
    """Upstream failures keep their status code and body (500 when there is none)."""
    logger.warning(
        "Riot API error",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.response_data or exc.message},
    )


app.include_router(players_router, prefix="/api")
app.include_router(teams_router, prefix="/api")


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": __version__,
        "debug": settings.debug,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "team_balancer.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
