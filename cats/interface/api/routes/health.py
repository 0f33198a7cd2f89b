"""Health, liveness and readiness routes."""

from datetime import UTC, datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from cats.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str


class LivenessResponse(BaseModel):
    uptime: int


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Hello World"


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        version=settings.version,
    )


def build_probe_router(liveness_path: str, readiness_path: str) -> APIRouter:
    """Router for the orchestrator probes, mounted at configurable paths.

    Both probes read the ``ServerState`` stored on ``app.state.server``.
    """
    probes = APIRouter(tags=["health"])

    @probes.get(liveness_path, response_model=LivenessResponse)
    async def liveness(request: Request) -> LivenessResponse:
        return LivenessResponse(uptime=request.app.state.server.uptime())

    @probes.get(readiness_path)
    async def readiness(request: Request) -> JSONResponse:
        if request.app.state.server.is_ready:
            return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ready"})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "not ready"},
        )

    return probes
