import logging
from typing import Optional

from formhole import config
from formhole.interfaces.store import ISubmissionStore
from formhole.repositories.submission_repository import SubmissionRepository

logger = logging.getLogger(__name__)


class Factory:
    _store: Optional[ISubmissionStore] = None

    @staticmethod
    def get_store() -> ISubmissionStore:
        if Factory._store is None:
            logger.info("Creating submission store")
            Factory._store = SubmissionRepository(config.DATABASE_URL)
        return Factory._store

    @staticmethod
    def reset() -> None:
        if isinstance(Factory._store, SubmissionRepository):
            Factory._store.dispose()
        Factory._store = None


def get_store() -> ISubmissionStore:
    """Dependency handing every request the process-wide store"""
    return Factory.get_store()
