import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import DATABASE_URL
from app.core.database import init_db
from app.core.logging_config import setup_logging

logger = logging.getLogger("app")


def main():
    """데이터베이스 테이블을 초기화합니다.

    Summary:
        user_favorites, user_station_lists, station_list_items 테이블과
        유니크 제약조건/인덱스/ON DELETE CASCADE 외래키를 생성합니다.

    Rationale:
        애플리케이션 시작 시(lifespan)에도 같은 작업을 수행하지만, 배포 전에 스키마를 미리 만들고
        DB 연결을 검증하기 위한 유틸리티 스크립트입니다.
        스키마 변경이 필요해지면 Alembic 같은 마이그레이션 도구를 사용하는 것을 권장합니다.
    """
    # 접속 정보(비밀번호)가 로그에 남지 않도록 호스트 이후만 기록
    logger.info(f"Creating tables on {DATABASE_URL.rsplit('@', 1)[-1]}")
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error(f"Error creating tables: {e}", exc_info=True)
        raise SystemExit(1) from e
    logger.info("Tables created successfully.")


if __name__ == "__main__":
    # NOTE: 루트 디렉토리에서 'python -m scripts.init_db' 명령어로 실행해야 함
    setup_logging()
    main()
