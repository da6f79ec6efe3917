class CacheBackendError(Exception):
    """캐시 백엔드(Redis) 연결/타임아웃/명령 실패.

    BaseCustomException을 상속하지 않습니다. 캐시 계층 내부에서 항상 처리(cache miss로 취급)되며
    클라이언트 응답으로 변환되는 일이 없어야 하기 때문입니다.
    """
