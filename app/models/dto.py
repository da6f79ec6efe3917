from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional


# Identity DTO (Identity Verifier 결과)
class AuthenticatedUser(BaseModel):
    """검증된 Bearer 토큰에서 추출한 사용자 정보"""
    user_id: str = Field(description="User identifier (JWT `sub`)")
    email: Optional[str] = Field(None, description="User email claim")


# Request DTO
class FavoriteCreateRequest(BaseModel):
    """POST /api/me/favorites 본문"""
    # NOTE: 누락/빈 값은 422가 아니라 서비스 계층의 ValidationError(400)로 처리하기 위해 Optional로 받음
    stationId: Optional[str] = Field(None, description="Radio-Browser stationuuid")


class StationListNameRequest(BaseModel):
    """리스트 생성(POST) / 이름 변경(PUT) 본문"""
    name: Optional[str] = Field(None, description="List name (non-empty after trimming)")


class StationListAddStationRequest(BaseModel):
    """POST /api/me/lists/{listId}/stations 본문"""
    stationId: Optional[str] = Field(None, description="Radio-Browser stationuuid")


# Response DTO
class StationListView(BaseModel):
    """리스트 메타데이터 + 멤버 stationuuid를 모두 해석한 응답 모델"""
    id: int = Field(description="List ID")
    name: str = Field(description="List name")
    createdAt: datetime = Field(description="Creation time")
    stationIds: List[str] = Field(default_factory=list, description="Member station UUIDs")


class StationListDeleteResult(BaseModel):
    id: int
    deleted: bool


# Service Result DTO (Internal Logic Use Only)
class FavoriteRemovalResult(BaseModel):
    """즐겨찾기 삭제 결과

    removed는 실제로 행이 삭제된 경우에만 True. 이미 없던 경우도 오류가 아니라 removed=False로 표현합니다.
    """
    favorites: List[str] = Field(default_factory=list, description="Favorite station UUIDs after removal")
    removed: bool = Field(description="Whether a row was actually deleted")


class StationRemovalResult(BaseModel):
    """리스트 멤버 삭제 결과 (리스트가 없거나 소유자가 아니면 station_list=None, removed=False)"""
    station_list: Optional[StationListView] = None
    removed: bool = False
