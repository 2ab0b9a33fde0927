from fastapi import APIRouter

from app.schemas.common import HealthResponse
from app.utils.http import ALL_METHODS, AnyMethodRoute

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/healthz", methods=ALL_METHODS, response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")
