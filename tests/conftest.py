import os
import tempfile

# app 모듈 import 전에 설정해야 config/engine에 반영됨
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-radio-library-secret"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="radio-library-logs-"))

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_live_station_cache
from app.auth.security import create_access_token
from app.cache.live_station_cache import LiveStationCache
from app.core.database import build_engine, get_db, init_db
from app.core.limiter import limiter
from app.directory.base import BaseStationDirectory
from app.exception.cache.cache_exception import CacheBackendError
from app.main import app
from app.repositories.favorite_repository import SqlAlchemyFavoriteRepository
from app.repositories.station_list_repository import SqlAlchemyStationListRepository
from app.services.favorite_service import FavoriteService
from app.services.station_list_service import StationListService


# =============================================================================
# Test Doubles
# =============================================================================

class InMemoryCacheBackend:
    """dict 기반 캐시 백엔드. fail_get/fail_set으로 장애 상황을 재현합니다."""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}
        self.fail_get = False
        self.fail_set = False

    async def get(self, key: str) -> Optional[str]:
        if self.fail_get:
            raise CacheBackendError("cache unavailable")
        return self.store.get(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if self.fail_set:
            raise CacheBackendError("cache unavailable")
        self.store[key] = value
        self.ttls[key] = ttl_seconds


class FakeStationDirectory(BaseStationDirectory):
    """호출 인자를 기록하고 고정된 스테이션 목록을 돌려주는 디렉토리"""

    def __init__(self, stations: Optional[List[dict]] = None, error: Optional[Exception] = None):
        self.stations = stations if stations is not None else []
        self.error = error
        self.calls: List[tuple] = []

    async def search(self, limit, name=None, tag=None):
        self.calls.append((limit, name, tag))
        if self.error is not None:
            raise self.error
        return list(self.stations)


SAMPLE_STATIONS = [
    {
        "stationuuid": "960e57c5-0601-11e8-ae97-52543be04c81",
        "name": "Jazz Radio Blues",
        "url": "http://jazzblues.ice.infomaniak.ch/jazzblues-high.mp3",
        "tags": "jazz,blues",
        "clickcount": 512,
    },
    {
        "stationuuid": "9617a958-0601-11e8-ae97-52543be04c81",
        "name": "Smooth Jazz Florida",
        "url": "http://usa7.fastcast4u.com/proxy/wsjfhd",
        "tags": "jazz,smooth jazz",
        "clickcount": 301,
    },
]


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """테스트마다 새로 만드는 in-memory SQLite (모든 세션이 같은 연결을 공유하도록 StaticPool)"""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def favorite_service(db_session):
    return FavoriteService(SqlAlchemyFavoriteRepository(db_session))


@pytest.fixture
def station_list_service(db_session):
    return StationListService(SqlAlchemyStationListRepository(db_session))


# =============================================================================
# Cache / Directory Fixtures
# =============================================================================

@pytest.fixture
def cache_backend():
    return InMemoryCacheBackend()


@pytest.fixture
def station_directory():
    return FakeStationDirectory(stations=SAMPLE_STATIONS)


@pytest.fixture
def live_station_cache(station_directory, cache_backend):
    return LiveStationCache(station_directory, cache_backend)


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def client(session_factory, live_station_cache):
    """DB 세션과 라이브 검색 캐시를 테스트용으로 교체한 TestClient"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_live_station_cache] = lambda: live_station_cache
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """사용자 ID별 Authorization 헤더를 만드는 팩토리"""

    def _make(user_id: str = "u1", email: Optional[str] = None) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id, email=email)}"}

    return _make
