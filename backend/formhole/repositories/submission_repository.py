import logging
from typing import List

from sqlalchemy.engine import Engine

from formhole.database import init_db, make_engine, make_session_factory
from formhole.interfaces.store import ISubmissionStore
from formhole.models.submission import Submission
from formhole.schemas.submission import SubmissionCreate, SubmissionRecord

logger = logging.getLogger(__name__)


class SubmissionRepository(ISubmissionStore):
    """SQLAlchemy backed submission store.

    The engine and session factory live as long as the repository; every call
    opens its own short-lived session, so one instance can serve concurrent
    requests.
    """

    def __init__(self, database_url: str = None, engine: Engine = None):
        if engine is None:
            if database_url is None:
                raise ValueError("database_url or engine is required")
            engine = make_engine(database_url)
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def init_db(self) -> None:
        init_db(self.engine)
        logger.info("Submission tables ready")

    def add(self, submission: SubmissionCreate) -> str:
        db = self.SessionLocal()
        try:
            row = Submission(
                name=submission.name,
                message=submission.message,
                timestamp=submission.timestamp,
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.debug(f"[{row.id}] Inserted submission")
            return row.id
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def list_recent(self, limit: int) -> List[SubmissionRecord]:
        db = self.SessionLocal()
        try:
            rows = (
                db.query(Submission)
                .order_by(Submission.timestamp.desc(), Submission.id.desc())
                .limit(limit)
                .all()
            )
            return [SubmissionRecord.model_validate(row) for row in rows]
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
