from typing import List
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.favorite import UserFavorite
from app.repositories.base import IFavoriteRepository
from app.repositories.sql_helpers import insert_ignore, store_operation

logger = logging.getLogger(__name__)


class SqlAlchemyFavoriteRepository(IFavoriteRepository):
    """
    SQLAlchemy 기반 즐겨찾기 저장소 구현체
    테이블: user_favorites (user_id, station_uuid) UNIQUE
    """

    def __init__(self, session: Session):
        """
        Args:
            session (Session): 요청 단위 DB 세션 (get_db 의존성에서 주입)
        """
        self.session = session

    def add(self, user_id: str, station_uuid: str) -> bool:
        """
        즐겨찾기 추가 (ON CONFLICT DO NOTHING)

        Rationale:
            - exists() + insert() 대신 단일 INSERT 문으로 처리하여 경합 구간을 없앰
            - 중복 추가는 에러가 아니라 False 반환 (멱등성 보장)
        """
        with store_operation(self.session, "add favorite", user_id=user_id, station_uuid=station_uuid):
            inserted = insert_ignore(
                self.session,
                UserFavorite,
                {"user_id": user_id, "station_uuid": station_uuid},
                ("user_id", "station_uuid"),
            )
            self.session.commit()

        if not inserted:
            logger.info(f"Favorite already present for user {user_id}: {station_uuid}")
        return inserted > 0

    def delete(self, user_id: str, station_uuid: str) -> bool:
        with store_operation(self.session, "delete favorite", user_id=user_id, station_uuid=station_uuid):
            result = self.session.execute(
                delete(UserFavorite)
                .where(UserFavorite.user_id == user_id)
                .where(UserFavorite.station_uuid == station_uuid)
            )
            self.session.commit()
        return result.rowcount > 0

    def get_all(self, user_id: str) -> List[str]:
        with store_operation(self.session, "fetch favorites", user_id=user_id):
            rows = self.session.execute(
                select(UserFavorite.station_uuid)
                .where(UserFavorite.user_id == user_id)
                .order_by(UserFavorite.id)
            ).scalars().all()
        return list(rows)
