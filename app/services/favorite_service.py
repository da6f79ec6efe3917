"""
즐겨찾기 라이브러리 서비스

모든 변경(add/remove) 후에는 사용자의 전체 즐겨찾기 목록을 다시 조회하여 반환합니다.
클라이언트는 delta가 아닌 최신 상태를 받으므로, 다른 세션에서 동시에 변경이 일어나도 화면이 어긋나지 않습니다.
"""

from __future__ import annotations
import logging
from typing import List

from app.models.dto import FavoriteRemovalResult
from app.repositories.base import IFavoriteRepository
from app.validate.library_validator import validate_station_uuid

logger = logging.getLogger("app")


class FavoriteService:
    """사용자별 즐겨찾기 stationuuid CRUD.

    Attributes:
        repository: IFavoriteRepository 구현체 (요청 단위 세션에 바인딩)
    """

    def __init__(self, repository: IFavoriteRepository):
        self.repository = repository

    def list_favorites(self, user_id: str) -> List[str]:
        return self.repository.get_all(user_id)

    def add_favorite(self, user_id: str, station_uuid: str | None) -> List[str]:
        """
        즐겨찾기 추가 후 최신 목록 반환 (이미 있으면 no-op)

        Raises:
            ValidationError: station_uuid가 비어있는 경우
            StoreError: 쓰기 또는 재조회 실패
        """
        station_uuid = validate_station_uuid(station_uuid)
        added = self.repository.add(user_id, station_uuid)
        logger.info(
            f"Favorite {'added' if added else 'unchanged'} for user {user_id}",
            extra={"station_uuid": station_uuid},
        )
        return self.repository.get_all(user_id)

    def remove_favorite(self, user_id: str, station_uuid: str | None) -> FavoriteRemovalResult:
        """
        즐겨찾기 삭제 후 최신 목록과 실제 삭제 여부 반환

        원래 없던 항목을 삭제해도 오류가 아니며 removed=False로 표현합니다.
        """
        station_uuid = validate_station_uuid(station_uuid)
        removed = self.repository.delete(user_id, station_uuid)
        return FavoriteRemovalResult(
            favorites=self.repository.get_all(user_id),
            removed=removed,
        )
