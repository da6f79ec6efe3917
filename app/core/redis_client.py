from functools import lru_cache
from redis.asyncio import Redis
from app.core.config import REDIS_URL, REDIS_SOCKET_TIMEOUT

@lru_cache
def get_redis_client() -> Redis:
    """
    Redis 비동기 클라이언트 반환 (Singleton via lru_cache)

    Returns:
        Redis: redis.asyncio 클라이언트 인스턴스 (커넥션 풀 공유)

    Rationale:
        - 생성 시점에는 연결하지 않고 첫 명령에서 연결 (Redis가 내려가 있어도 앱 기동 가능)
        - 짧은 socket timeout으로 캐시 장애가 요청 지연으로 번지지 않도록 제한
    """
    return Redis.from_url(
        REDIS_URL,
        decode_responses=True,
        socket_connect_timeout=REDIS_SOCKET_TIMEOUT,
        socket_timeout=REDIS_SOCKET_TIMEOUT,
    )
