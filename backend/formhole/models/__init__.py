from formhole.models.submission import Base, Submission

__all__ = ["Base", "Submission"]
