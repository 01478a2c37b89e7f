"""Notification Service for transient, non-blocking user messages"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional

from ...utils.datetime_utils import now_iso

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: str
    detail: Optional[str] = None


NotificationListener = Callable[[Notification], None]


class NotificationService:
    """
    Collects transient notifications (toasts) for the presentation layer.
    
    Pending notifications sit in a bounded queue until a view drains them;
    the oldest are dropped once the queue is full. Listeners are called
    synchronously on publish, so a view can render immediately instead of
    polling.
    """
    
    def __init__(self, max_pending: int = 50) -> None:
        self._pending: Deque[Notification] = deque(maxlen=max_pending)
        self._listeners: List[NotificationListener] = []
    
    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        """
        Register a listener.
        
        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)
        
        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        
        return unsubscribe
    
    def publish(
        self,
        level: NotificationLevel,
        message: str,
        detail: Optional[str] = None,
    ) -> Notification:
        notification = Notification(
            level=level,
            message=message,
            created_at=now_iso(),
            detail=detail,
        )
        self._pending.append(notification)
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception as e:
                logger.error(f"Notification listener failed: {e}", exc_info=True)
        return notification
    
    def success(self, message: str) -> Notification:
        return self.publish(NotificationLevel.SUCCESS, message)
    
    def error(self, message: str, detail: Optional[str] = None) -> Notification:
        return self.publish(NotificationLevel.ERROR, message, detail=detail)
    
    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)
    
    def drain(self) -> List[Notification]:
        """Return pending notifications and clear the queue."""
        drained = list(self._pending)
        self._pending.clear()
        return drained
