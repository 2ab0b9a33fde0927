from fastapi import APIRouter

from app.schemas.common import VersionResponse
from app.utils.http import ALL_METHODS, AnyMethodRoute

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/version", methods=ALL_METHODS, response_model=VersionResponse)
async def version() -> VersionResponse:
    return VersionResponse()
