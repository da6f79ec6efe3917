"""
스테이션 리스트 라이브러리 서비스

사용자가 만든 이름 있는 리스트와 그 멤버(stationuuid)를 관리합니다.

주요 규칙:
- 모든 변경 작업은 요청마다 소유권을 다시 확인합니다 (list_id 추측으로 다른 사용자의 리스트를 변경하지 못하도록).
- "존재하지 않음"과 "다른 사용자의 리스트"는 구분 없이 None(Not Found)으로 반환합니다.
- 변경 후에는 리스트 메타데이터 + 멤버 전체를 다시 조회한 결과를 반환합니다.
"""

from __future__ import annotations
import logging
from datetime import timezone
from typing import List, Optional

from app.models.dto import StationListView, StationRemovalResult
from app.models.station_list import StationList
from app.repositories.base import IStationListRepository
from app.validate.library_validator import validate_list_name, validate_station_uuid

logger = logging.getLogger("app")


class StationListService:
    """스테이션 리스트 CRUD 및 리스트 멤버 관리 서비스.

    설계 결정:
    - Not Found는 예외가 아닌 None으로 반환하고, HTTP 매핑(404)은 API 계층이 담당
    - 입력 검증 실패는 ValidationError, 저장소 실패는 StoreError로 전파

    사용 예시:
        >>> service = StationListService(SqlAlchemyStationListRepository(db))
        >>> created = service.create_list("u1", "Favorites Radio")
        >>> service.add_station("u1", created.id, "abc-uuid")
    """

    def __init__(self, repository: IStationListRepository):
        self.repository = repository

    def _resolve(self, station_list: StationList, station_ids: Optional[List[str]] = None) -> StationListView:
        if station_ids is None:
            station_ids = self.repository.station_ids(station_list.id)
        created_at = station_list.created_at
        # SQLite는 tz 정보를 저장하지 않으므로 naive 값은 저장 시점의 UTC로 간주
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return StationListView(
            id=station_list.id,
            name=station_list.name,
            createdAt=created_at,
            stationIds=station_ids,
        )

    def create_list(self, user_id: str, name: str | None) -> StationListView:
        """새 리스트 생성 (멤버는 비어있는 상태로 반환)"""
        name = validate_list_name(name)
        station_list = self.repository.create(user_id, name)
        logger.info(f"Station list {station_list.id} created for user {user_id}")
        return self._resolve(station_list, station_ids=[])

    def list_all(self, user_id: str) -> List[StationListView]:
        """사용자 소유 리스트 전체를 최신 생성 순으로, 멤버까지 해석하여 반환"""
        lists = self.repository.list_by_user(user_id)
        members = self.repository.station_ids_for_lists([item.id for item in lists])
        return [self._resolve(item, station_ids=list(members.get(item.id, []))) for item in lists]

    def get_detail(self, user_id: str, list_id: int) -> Optional[StationListView]:
        station_list = self.repository.find_owned(user_id, list_id)
        if station_list is None:
            return None
        return self._resolve(station_list)

    def rename(self, user_id: str, list_id: int, new_name: str | None) -> Optional[StationListView]:
        """소유한 리스트의 이름만 변경. 소유하지 않았으면 None."""
        new_name = validate_list_name(new_name)
        if not self.repository.rename(user_id, list_id, new_name):
            return None
        return self.get_detail(user_id, list_id)

    def delete(self, user_id: str, list_id: int) -> bool:
        deleted = self.repository.delete(user_id, list_id)
        if deleted:
            logger.info(f"Station list {list_id} deleted for user {user_id}")
        return deleted

    def add_station(self, user_id: str, list_id: int, station_uuid: str | None) -> Optional[StationListView]:
        """
        리스트에 스테이션 추가 (이미 있으면 no-op)

        소유권을 별도 쿼리로 먼저 확인하고, 소유하지 않은 리스트면 멤버 테이블을 건드리지 않고 None을 반환합니다.
        """
        station_uuid = validate_station_uuid(station_uuid)
        if not self.repository.exists_owned(user_id, list_id):
            return None

        self.repository.add_station(list_id, station_uuid)
        return self.get_detail(user_id, list_id)

    def remove_station(self, user_id: str, list_id: int, station_uuid: str | None) -> StationRemovalResult:
        """
        리스트에서 스테이션 삭제 (없어도 오류 아님)

        Returns:
            StationRemovalResult: 리스트가 없거나 소유하지 않았으면 (None, False),
                아니면 삭제 후 리스트 상태와 실제 삭제 여부
        """
        station_uuid = validate_station_uuid(station_uuid)
        if self.get_detail(user_id, list_id) is None:
            return StationRemovalResult(station_list=None, removed=False)

        removed = self.repository.remove_station(list_id, station_uuid)
        return StationRemovalResult(
            station_list=self.get_detail(user_id, list_id),
            removed=removed,
        )
