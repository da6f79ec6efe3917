from sqlalchemy import Column, Integer, String, UniqueConstraint, DateTime, ForeignKey
from app.core.database import Base
from app.models.favorite import utc_now


class StationList(Base):
    """사용자가 만든 이름 있는 스테이션 리스트 (user_station_lists).

    Invariants:
        - id는 전역 유일 (Auto Increment PK)
        - user_id는 생성 후 변경되지 않음 (이름만 수정 가능)
        - name은 trim 후 비어있지 않은 문자열 (서비스 계층에서 검증)
    """
    __tablename__ = "user_station_lists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


class StationListItem(Base):
    """스테이션 리스트의 멤버 (station_list_items)."""
    __tablename__ = "station_list_items"
    __table_args__ = (
        UniqueConstraint('list_id', 'station_uuid', name='uq_station_list_items_list_station'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 리스트 삭제 시 항목 삭제는 DB의 ON DELETE CASCADE가 수행함
    list_id = Column(
        Integer,
        ForeignKey("user_station_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    station_uuid = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

