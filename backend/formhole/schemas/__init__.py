from formhole.schemas.submission import SubmissionCreate, SubmissionRecord

__all__ = ["SubmissionCreate", "SubmissionRecord"]
