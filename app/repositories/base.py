from typing import Dict, List, Optional, Protocol, Sequence

from app.models.station_list import StationList


class IFavoriteRepository(Protocol):
    """즐겨찾기 저장소 인터페이스 (Repository Pattern Protocol)

    모든 메서드는 user_id로 범위가 제한되며, 저장소 실패 시 StoreError를 발생시킵니다.
    """

    def add(self, user_id: str, station_uuid: str) -> bool:
        """
        즐겨찾기 추가 (중복이면 no-op)

        Returns:
            bool: 새 행이 생성되면 True, 이미 존재하면 False
        """
        ...

    def delete(self, user_id: str, station_uuid: str) -> bool:
        """
        즐겨찾기 삭제

        Returns:
            bool: 실제로 행이 삭제되면 True, 원래 없었다면 False
        """
        ...

    def get_all(self, user_id: str) -> List[str]:
        """
        사용자의 즐겨찾기 stationuuid 목록 조회 (생성 순)
        """
        ...


class IStationListRepository(Protocol):
    """스테이션 리스트 / 리스트 멤버 저장소 인터페이스"""

    def create(self, user_id: str, name: str) -> StationList:
        ...

    def list_by_user(self, user_id: str) -> List[StationList]:
        """사용자 소유 리스트 전체 (최신 생성 순)"""
        ...

    def find_owned(self, user_id: str, list_id: int) -> Optional[StationList]:
        """user_id 소유의 list_id 리스트. 없거나 소유자가 다르면 None."""
        ...

    def exists_owned(self, user_id: str, list_id: int) -> bool:
        ...

    def rename(self, user_id: str, list_id: int, name: str) -> bool:
        """소유한 리스트의 이름을 변경. 대상이 없으면 False."""
        ...

    def delete(self, user_id: str, list_id: int) -> bool:
        """소유한 리스트 삭제 (멤버는 DB cascade로 함께 삭제). 대상이 없으면 False."""
        ...

    def station_ids(self, list_id: int) -> List[str]:
        ...

    def station_ids_for_lists(self, list_ids: Sequence[int]) -> Dict[int, List[str]]:
        ...

    def add_station(self, list_id: int, station_uuid: str) -> bool:
        """멤버 추가 (중복이면 no-op). 새 행이 생성되면 True."""
        ...

    def remove_station(self, list_id: int, station_uuid: str) -> bool:
        """멤버 삭제. 실제로 삭제되면 True."""
        ...
