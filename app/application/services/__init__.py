"""Application services."""

from app.application.services.event_fanout import EventFanoutPublisher

__all__ = ["EventFanoutPublisher"]
