"""파이프라인 분석 이벤트 로그

파이프라인은 notify()로만 이벤트를 전달하며, 옵저버 실패는 파이프라인 결과에
영향을 주지 않는다.
"""

from datetime import datetime, timezone
from typing import Any, Protocol

from pydantic import BaseModel

from profileprism.core.logging import get_logger

logger = get_logger(__name__)


class AnalyticsEvent(BaseModel):
    """분석 이벤트 단건"""

    timestamp: str
    event: str
    details: dict[str, Any]


class AnalyticsObserver(Protocol):
    def record(self, event: str, details: dict[str, Any]) -> None: ...


class AnalyticsLog:
    """메모리 기반 append-only 이벤트 로그"""

    def __init__(self):
        self._events: list[AnalyticsEvent] = []

    @property
    def events(self) -> tuple[AnalyticsEvent, ...]:
        return tuple(self._events)

    def record(self, event: str, details: dict[str, Any]) -> None:
        entry = AnalyticsEvent(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            details=details,
        )
        self._events.append(entry)
        logger.info("분석 이벤트", analytics_event=event, details=details)


def notify(observer: AnalyticsObserver | None, event: str, **details: Any) -> None:
    """옵저버에 이벤트 전달, 실패는 로그만 남기고 무시"""
    if observer is None:
        return
    try:
        observer.record(event, details)
    except Exception as e:
        logger.warning("분석 이벤트 기록 실패 event=%s error=%s", event, type(e).__name__)
