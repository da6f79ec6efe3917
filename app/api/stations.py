from fastapi import APIRouter, Depends, Query, Request, status
from typing import Any, Dict, List, Optional

from app.api.dependencies import get_live_station_cache
from app.cache.live_station_cache import LiveStationCache
from app.core.config import LIVE_STATIONS_DEFAULT_LIMIT
from app.core.limiter import LIVE_SEARCH_RATE_LIMIT, limiter
from app.core.response import ApiResponse, success_response

router = APIRouter(
    prefix="/api/stations",
    tags=["Stations"],
)


@router.get("/live", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[Dict[str, Any]]])
@limiter.limit(LIVE_SEARCH_RATE_LIMIT)
async def get_live_stations(
    request: Request,
    limit: int = Query(LIVE_STATIONS_DEFAULT_LIMIT, ge=1, description="Maximum number of stations to return"),
    name: Optional[str] = Query(None, description="Filter stations by name"),
    tag: Optional[str] = Query(None, description="Filter stations by tag (genre)"),
    cache: LiveStationCache = Depends(get_live_station_cache),
):
    """
    Radio-Browser 라이브 스테이션 검색 (1시간 캐시)

    Returns:
        200 OK: result = 디렉토리가 반환한 스테이션 레코드 목록 (원본 그대로)
        500: 디렉토리 호출 실패 (DirectoryError)
    """
    return success_response(await cache.search(limit, name, tag))
