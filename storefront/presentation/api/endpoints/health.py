"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter, Request

from storefront.application.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Returns the service name, health status and current UTC timestamp."""
    return HealthResponse(service=request.app.state.service_name)
