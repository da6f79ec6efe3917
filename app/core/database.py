from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import DATABASE_URL


def build_engine(url: str, **kwargs) -> Engine:
    """DATABASE_URL에 맞는 SQLAlchemy 엔진을 생성합니다.

    Rationale:
        SQLite는 기본적으로 단일 스레드에서만 연결을 허용합니다(check_same_thread=True).
        FastAPI는 동기 핸들러를 ThreadPoolExecutor에서 실행하므로 check_same_thread=False가 필요합니다.

        또한 SQLite는 연결마다 foreign_keys PRAGMA가 꺼져 있어 ON DELETE CASCADE가 동작하지 않습니다.
        리스트 삭제 시 항목 삭제를 DB 제약조건에 맡기므로, 연결 시점에 PRAGMA를 켭니다.
    """
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)

    engine = create_engine(url, connect_args=connect_args, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(DATABASE_URL, pool_pre_ping=True)

# NOTE: 요청마다 독립적인 세션을 생성하기 위해 SessionLocal 팩토리를 사용함.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI 의존성 주입용 DB 세션 제공 함수입니다.

    Yields:
        Session: 요청별로 생성된 독립적인 DB 세션.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """모델 메타데이터 기준으로 테이블을 생성합니다 (이미 있으면 건너뜀)."""
    # 모델 모듈을 import해야 Base.metadata에 테이블이 등록됨
    import app.models.favorite  # noqa: F401
    import app.models.station_list  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
