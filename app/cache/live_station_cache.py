"""
라이브 스테이션 검색 캐시

외부 디렉토리(Radio-Browser) 검색 결과를 (limit, name, tag) 단위로 일정 시간 캐싱합니다.

규칙:
- 캐시 키는 정규화된 (limit, name or "", tag or "") 문자열. 생략과 빈 문자열은 같은 키가 됨
- 캐시 백엔드 장애(GET/SET 실패)는 항상 내부에서 처리하며 cache miss로 취급
- 디렉토리 호출 실패만 호출자에게 DirectoryError로 전달 (오래된 값을 대신 반환하지 않음)
"""

from __future__ import annotations
import json
import logging
from typing import List, Optional
from urllib.parse import quote

from app.cache.backend import ICacheBackend
from app.core.config import LIVE_STATIONS_CACHE_TTL, LIVE_STATIONS_DEFAULT_LIMIT
from app.directory.base import BaseStationDirectory, StationRecord
from app.exception.cache.cache_exception import CacheBackendError

logger = logging.getLogger("app")

CACHE_KEY_PREFIX = "radioStations"


def _key_part(value: Optional[str]) -> str:
    # 구분자(:, =)가 값 안에 있어도 키가 겹치지 않도록 퍼센트 인코딩
    return quote(value or "", safe="")


def build_cache_key(limit: int, name: Optional[str] = None, tag: Optional[str] = None) -> str:
    """
    검색 조건을 캐시 키로 정규화

    Examples:
        >>> build_cache_key(50, "Jazz")
        'radioStations:limit=50:name=Jazz:tag='
        >>> build_cache_key(50, "Jazz", "") == build_cache_key(50, "Jazz", None)
        True
        >>> build_cache_key(50, "x:tag=", "") == build_cache_key(50, "x", ":tag=")
        False
    """
    return f"{CACHE_KEY_PREFIX}:limit={int(limit)}:name={_key_part(name)}:tag={_key_part(tag)}"


class LiveStationCache:
    """외부 디렉토리 클라이언트를 감싸는 TTL 캐시.

    Attributes:
        directory: 실제 검색을 수행하는 BaseStationDirectory 구현체 (source of truth)
        backend: ICacheBackend 구현체. None이면 캐시 없이 항상 디렉토리를 호출
        ttl_seconds: 캐시 만료 시간 (기본 1시간)
        default_limit: limit 미지정 시 사용할 값 (기본 100)
    """

    def __init__(
        self,
        directory: BaseStationDirectory,
        backend: Optional[ICacheBackend],
        ttl_seconds: int = LIVE_STATIONS_CACHE_TTL,
        default_limit: int = LIVE_STATIONS_DEFAULT_LIMIT,
    ):
        self.directory = directory
        self.backend = backend
        self.ttl_seconds = ttl_seconds
        self.default_limit = default_limit

    async def _read(self, key: str) -> Optional[List[StationRecord]]:
        if self.backend is None:
            return None
        try:
            cached = await self.backend.get(key)
        except CacheBackendError as e:
            logger.warning(f"Cache GET failed, falling back to directory: {e}", extra={"cache_key": key})
            return None

        if cached is None:
            logger.info(f"Cache miss for key: {key}")
            return None

        try:
            stations = json.loads(cached)
        except ValueError:
            logger.warning(f"Discarding undecodable cache entry for key: {key}")
            return None
        if not isinstance(stations, list):
            logger.warning(f"Discarding non-list cache entry for key: {key}")
            return None

        logger.info(f"Cache hit for key: {key}")
        return stations

    async def _write(self, key: str, stations: List[StationRecord]) -> None:
        if self.backend is None:
            return
        try:
            await self.backend.set(key, json.dumps(stations, ensure_ascii=False), self.ttl_seconds)
        except CacheBackendError as e:
            # 저장 실패는 응답에 영향을 주지 않음
            logger.warning(f"Cache SET failed, response served uncached: {e}", extra={"cache_key": key})
            return
        logger.info(f"Cached {len(stations)} stations for key: {key}")

    async def search(
        self,
        limit: Optional[int] = None,
        name: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> List[StationRecord]:
        """
        캐시 우선 스테이션 검색

        Raises:
            DirectoryError: cache miss(또는 캐시 장애) 후 디렉토리 호출이 실패한 경우
        """
        if limit is None:
            limit = self.default_limit
        key = build_cache_key(limit, name, tag)

        cached = await self._read(key)
        if cached is not None:
            return cached

        stations = await self.directory.search(limit, name or None, tag or None)
        await self._write(key, stations)
        return stations
