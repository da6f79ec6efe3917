from typing import Optional
from app.exception.library.library_exception import ValidationError

# 컬럼 길이(String(255))와 동일하게 유지
MAX_FIELD_LENGTH = 255

# --- 단위 검증 함수들 ---

def validate_station_uuid(station_uuid: Optional[str]) -> str:
    """stationuuid가 누락되었거나 공백뿐이면 ValidationError. 앞뒤 공백을 제거한 값을 반환."""
    if not isinstance(station_uuid, str) or not station_uuid.strip():
        raise ValidationError("stationId(stationuuid)는 필수입니다.")
    station_uuid = station_uuid.strip()
    if len(station_uuid) > MAX_FIELD_LENGTH:
        raise ValidationError(f"stationId는 최대 {MAX_FIELD_LENGTH}자까지 가능합니다.")
    return station_uuid


def validate_list_name(name: Optional[str]) -> str:
    """리스트 이름은 trim 후 비어있지 않아야 함. trim된 이름을 반환."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("리스트 이름은 비어있지 않은 문자열이어야 합니다.")
    name = name.strip()
    if len(name) > MAX_FIELD_LENGTH:
        raise ValidationError(f"리스트 이름은 최대 {MAX_FIELD_LENGTH}자까지 가능합니다.")
    return name
