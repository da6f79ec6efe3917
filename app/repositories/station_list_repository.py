from collections import defaultdict
from typing import Dict, List, Optional, Sequence
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.models.station_list import StationList, StationListItem
from app.repositories.base import IStationListRepository
from app.repositories.sql_helpers import insert_ignore, store_operation

logger = logging.getLogger(__name__)


class SqlAlchemyStationListRepository(IStationListRepository):
    """
    SQLAlchemy 기반 스테이션 리스트 저장소 구현체
    테이블: user_station_lists, station_list_items (list_id → user_station_lists.id ON DELETE CASCADE)

    Note:
        리스트를 대상으로 하는 모든 쿼리는 WHERE id = :list_id AND user_id = :user_id 형태로
        소유자 조건을 함께 겁니다. 멤버 테이블 쿼리(add/remove_station)는 호출 전에
        서비스 계층에서 소유권 확인이 끝났다는 전제로 list_id만 사용합니다.
    """

    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: str, name: str) -> StationList:
        with store_operation(self.session, "create station list", user_id=user_id):
            station_list = StationList(user_id=user_id, name=name)
            self.session.add(station_list)
            self.session.commit()
            self.session.refresh(station_list)
        return station_list

    def list_by_user(self, user_id: str) -> List[StationList]:
        with store_operation(self.session, "fetch station lists", user_id=user_id):
            rows = self.session.execute(
                select(StationList)
                .where(StationList.user_id == user_id)
                .order_by(StationList.created_at.desc(), StationList.id.desc())
            ).scalars().all()
        return list(rows)

    def find_owned(self, user_id: str, list_id: int) -> Optional[StationList]:
        with store_operation(self.session, "fetch station list", user_id=user_id, list_id=list_id):
            return self.session.execute(
                select(StationList)
                .where(StationList.id == list_id)
                .where(StationList.user_id == user_id)
                .execution_options(populate_existing=True)
            ).scalar_one_or_none()

    def exists_owned(self, user_id: str, list_id: int) -> bool:
        with store_operation(self.session, "check station list ownership", user_id=user_id, list_id=list_id):
            found = self.session.execute(
                select(StationList.id)
                .where(StationList.id == list_id)
                .where(StationList.user_id == user_id)
                .limit(1)
            ).first()
        return found is not None

    def rename(self, user_id: str, list_id: int, name: str) -> bool:
        with store_operation(self.session, "rename station list", user_id=user_id, list_id=list_id):
            result = self.session.execute(
                update(StationList)
                .where(StationList.id == list_id)
                .where(StationList.user_id == user_id)
                .values(name=name)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        return result.rowcount > 0

    def delete(self, user_id: str, list_id: int) -> bool:
        with store_operation(self.session, "delete station list", user_id=user_id, list_id=list_id):
            result = self.session.execute(
                delete(StationList)
                .where(StationList.id == list_id)
                .where(StationList.user_id == user_id)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        return result.rowcount > 0

    def station_ids(self, list_id: int) -> List[str]:
        with store_operation(self.session, "fetch station list items", list_id=list_id):
            rows = self.session.execute(
                select(StationListItem.station_uuid)
                .where(StationListItem.list_id == list_id)
                .order_by(StationListItem.id)
            ).scalars().all()
        return list(rows)

    def station_ids_for_lists(self, list_ids: Sequence[int]) -> Dict[int, List[str]]:
        """여러 리스트의 멤버를 한 번의 쿼리로 조회 (리스트 수만큼 쿼리하지 않도록)"""
        grouped: Dict[int, List[str]] = defaultdict(list)
        if not list_ids:
            return grouped

        with store_operation(self.session, "fetch station list items", list_ids=list(list_ids)):
            rows = self.session.execute(
                select(StationListItem.list_id, StationListItem.station_uuid)
                .where(StationListItem.list_id.in_(list_ids))
                .order_by(StationListItem.list_id, StationListItem.id)
            ).all()

        for list_id, station_uuid in rows:
            grouped[list_id].append(station_uuid)
        return grouped

    def add_station(self, list_id: int, station_uuid: str) -> bool:
        with store_operation(self.session, "add station to list", list_id=list_id, station_uuid=station_uuid):
            inserted = insert_ignore(
                self.session,
                StationListItem,
                {"list_id": list_id, "station_uuid": station_uuid},
                ("list_id", "station_uuid"),
            )
            self.session.commit()
        return inserted > 0

    def remove_station(self, list_id: int, station_uuid: str) -> bool:
        with store_operation(self.session, "remove station from list", list_id=list_id, station_uuid=station_uuid):
            result = self.session.execute(
                delete(StationListItem)
                .where(StationListItem.list_id == list_id)
                .where(StationListItem.station_uuid == station_uuid)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        return result.rowcount > 0
