"""Interface for form submission validators"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ValidationFailure:
    # Sent back to the client
    message: str
    # Written to the log
    reason: str


class ISubmissionValidator(ABC):

    @abstractmethod
    def validate(self, content_type: Optional[str], form: Mapping[str, Any]) -> Optional[ValidationFailure]:
        """Return the first failed check, or None when the submission is acceptable."""
