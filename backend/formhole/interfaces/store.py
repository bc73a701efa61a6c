"""Interface for the submission store"""

from abc import ABC, abstractmethod
from typing import List

from formhole.schemas.submission import SubmissionCreate, SubmissionRecord


class ISubmissionStore(ABC):

    @abstractmethod
    def init_db(self) -> None:
        """Create the backing tables if they do not exist yet."""

    @abstractmethod
    def add(self, submission: SubmissionCreate) -> str:
        """Persist a submission and return its store-assigned id."""

    @abstractmethod
    def list_recent(self, limit: int) -> List[SubmissionRecord]:
        """Return at most `limit` submissions, newest first."""
