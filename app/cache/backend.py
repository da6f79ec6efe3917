from typing import Optional, Protocol

from redis.asyncio import Redis

from app.exception.cache.cache_exception import CacheBackendError


class ICacheBackend(Protocol):
    """TTL을 지원하는 key-value 캐시 백엔드 인터페이스"""

    async def get(self, key: str) -> Optional[str]:
        """
        Returns:
            저장된 문자열, 없거나 만료되었으면 None

        Raises:
            CacheBackendError: 연결/타임아웃/명령 실패
        """
        ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Raises:
            CacheBackendError: 연결/타임아웃/명령 실패
        """
        ...


class RedisCacheBackend(ICacheBackend):
    """redis.asyncio 기반 캐시 백엔드.

    연결/타임아웃 오류뿐 아니라 닫힌 이벤트 루프에 묶인 클라이언트의 RuntimeError 등
    클라이언트가 던지는 모든 예외를 CacheBackendError로 통일합니다.
    """

    def __init__(self, client: Redis):
        self.client = client

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(key)
        except Exception as e:
            raise CacheBackendError(f"Redis GET failed for {key}: {e}") from e

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self.client.set(key, value, ex=ttl_seconds)
        except Exception as e:
            raise CacheBackendError(f"Redis SET failed for {key}: {e}") from e
