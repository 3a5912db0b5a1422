"""Domain entities.

Pure domain models; no boto3 or persistence concerns.
"""

from app.domain.entities.task import TaskEntity

__all__ = ["TaskEntity"]
