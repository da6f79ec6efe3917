from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

# Radio-Browser가 반환하는 스테이션 레코드 (필드 구성은 그대로 통과시킴)
StationRecord = Dict[str, Any]


class BaseStationDirectory(ABC):
    """
    외부 스테이션 디렉토리가 구현해야 하는 기본 인터페이스.

    Example:
        class FakeDirectory(BaseStationDirectory):
            async def search(self, limit, name=None, tag=None):
                return [{"stationuuid": "abc-uuid", "name": "Jazz FM"}]
    """
    @abstractmethod
    async def search(self, limit: int, name: Optional[str] = None, tag: Optional[str] = None) -> List[StationRecord]:
        """
        limit/name/tag 조건으로 스테이션을 검색.

        Args:
            limit: 최대 반환 개수
            name: 이름 필터 (None 또는 빈 문자열이면 미적용)
            tag: 태그(장르) 필터 (None 또는 빈 문자열이면 미적용)

        Returns:
            디렉토리가 반환한 원본 스테이션 레코드 리스트

        Raises:
            DirectoryError: 네트워크 오류, 오류 상태코드, 응답 형식 오류
        """
        pass
