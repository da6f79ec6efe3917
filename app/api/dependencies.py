from __future__ import annotations
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.auth.security import verify_token
from app.cache.backend import RedisCacheBackend
from app.cache.live_station_cache import LiveStationCache
from app.core.context import set_user_id
from app.core.database import get_db
from app.core.redis_client import get_redis_client
from app.directory.radio_browser import RadioBrowserClient
from app.exception.auth.auth_exception import AuthError
from app.exception.base_exception import ErrorCode
from app.models.dto import AuthenticatedUser
from app.repositories.favorite_repository import SqlAlchemyFavoriteRepository
from app.repositories.station_list_repository import SqlAlchemyStationListRepository
from app.services.favorite_service import FavoriteService
from app.services.station_list_service import StationListService


async def get_current_user(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> AuthenticatedUser:
    """
    Authorization: Bearer <token> 검증 Dependency

    Raises:
        AuthError(401): 헤더가 없거나, Bearer 형식이 아니거나, 토큰 검증 실패
    """
    if not authorization or not authorization.strip():
        raise AuthError("인증 토큰이 필요합니다.", error_code=ErrorCode.AUTH_MISSING_TOKEN)

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Bearer 토큰 형식이 아닙니다.", error_code=ErrorCode.AUTH_MISSING_TOKEN)

    user = verify_token(token.strip())
    set_user_id(user.user_id)
    return user


# --- Library Dependencies ---

def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    """요청 단위 세션에 바인딩된 FavoriteService 반환 (DI용)."""
    return FavoriteService(SqlAlchemyFavoriteRepository(db))


def get_station_list_service(db: Session = Depends(get_db)) -> StationListService:
    """요청 단위 세션에 바인딩된 StationListService 반환 (DI용)."""
    return StationListService(SqlAlchemyStationListRepository(db))


# --- Live Station Dependencies ---

def get_station_directory(request: Request) -> RadioBrowserClient:
    """lifespan에서 생성한 공유 httpx.AsyncClient를 사용하는 디렉토리 클라이언트"""
    return RadioBrowserClient(request.app.state.http)


def get_live_station_cache(
    directory: RadioBrowserClient = Depends(get_station_directory),
) -> LiveStationCache:
    return LiveStationCache(directory, RedisCacheBackend(get_redis_client()))
