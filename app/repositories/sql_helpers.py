"""
Repository 공통 SQL 헬퍼

- insert_ignore: 유니크 제약조건 충돌 시 no-op이 되는 단일 INSERT 문 실행
- store_operation: SQLAlchemyError를 컨텍스트와 함께 로깅하고 StoreError로 변환
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Sequence

from sqlalchemy import insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exception.library.library_exception import StoreError

logger = logging.getLogger("app")

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def insert_ignore(session: Session, model, values: Dict[str, Any], conflict_columns: Sequence[str]) -> int:
    """INSERT ... ON CONFLICT (conflict_columns) DO NOTHING

    Returns:
        int: 실제로 삽입된 행 수 (0 또는 1)

    Note:
        동시에 같은 값을 추가하는 요청이 경합해도, 중복 판정은 DB 유니크 제약조건이 수행하므로
        애플리케이션 레벨의 read-modify-write가 필요 없습니다.
        ON CONFLICT를 지원하지 않는 방언은 SAVEPOINT + IntegrityError로 같은 의미를 구현합니다.
    """
    dialect_insert = _DIALECT_INSERTS.get(session.get_bind().dialect.name)
    if dialect_insert is not None:
        stmt = dialect_insert(model).values(**values).on_conflict_do_nothing(
            index_elements=list(conflict_columns)
        )
        return session.execute(stmt).rowcount

    try:
        with session.begin_nested():
            session.execute(insert(model).values(**values))
    except IntegrityError:
        return 0
    return 1


@contextmanager
def store_operation(session: Session, operation: str, **context: Any) -> Iterator[None]:
    """저장소 호출 구간을 감싸 실패 시 rollback → 로깅 → StoreError 전파

    Args:
        session: 현재 요청의 DB 세션
        operation: 로그에 남길 작업명 (예: "add favorite")
        **context: user_id, list_id, station_uuid 등 로그 컨텍스트
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(
            f"Store operation failed: {operation}: {e}",
            extra={"operation": operation, **context},
            exc_info=True,
        )
        raise StoreError(f"데이터 저장소 처리 중 오류가 발생했습니다. ({operation})") from e
