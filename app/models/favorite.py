from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, UniqueConstraint, DateTime
from app.core.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserFavorite(Base):
    """사용자의 즐겨찾기 스테이션 정보를 저장하는 테이블 모델입니다.

    Args:
        id (int): 레코드 고유 ID (PK, Auto Increment). 조회 시 정렬 기준으로도 사용.
        user_id (str): 사용자 식별값. Identity Verifier(JWT)가 검증한 `sub` 값.
        station_uuid (str): Radio-Browser 디렉토리의 stationuuid.
        created_at (datetime): 즐겨찾기 최초 생성 일시.

    Rationale:
        사용자 생성/관리는 외부(인증 계층)의 책임이므로 User 테이블과의 Foreign Key 대신
        단순 String 타입의 user_id를 사용합니다.
    """
    __tablename__ = "user_favorites"
    __table_args__ = (
        # 한 사용자가 동일한 스테이션을 중복해서 즐겨찾기 할 수 없도록 물리적 제약조건을 설정함.
        # 중복 추가는 INSERT ... ON CONFLICT DO NOTHING으로 no-op 처리됨.
        UniqueConstraint('user_id', 'station_uuid', name='uq_user_favorites_user_station'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    station_uuid = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
