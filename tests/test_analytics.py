"""분석 이벤트 로그 테스트"""

from unittest.mock import MagicMock

from profileprism.domain.profile.analytics import AnalyticsLog, notify


class TestAnalyticsLog:
    """AnalyticsLog 테스트"""

    def test_append_only_order(self):
        """기록 순서대로 보관"""
        log = AnalyticsLog()
        log.record("first", {"a": 1})
        log.record("second", {})

        assert [e.event for e in log.events] == ["first", "second"]
        assert log.events[0].details == {"a": 1}
        assert log.events[0].timestamp

    def test_events_snapshot(self):
        """events는 복사본이라 외부에서 바꿀 수 없음"""
        log = AnalyticsLog()
        log.record("first", {})

        events = log.events
        log.record("second", {})

        assert len(events) == 1
        assert isinstance(events, tuple)


class TestNotify:
    """notify 함수 테스트"""

    def test_passes_details(self):
        """키워드 인자를 details로 전달"""
        observer = MagicMock()
        notify(observer, "github_data_fetched", repo_count=3)
        observer.record.assert_called_once_with("github_data_fetched", {"repo_count": 3})

    def test_none_observer(self):
        """옵저버가 없으면 아무 일도 없음"""
        notify(None, "ignored")

    def test_observer_failure_swallowed(self):
        """옵저버 실패는 호출자에게 전파되지 않음"""
        observer = MagicMock()
        observer.record.side_effect = RuntimeError("sink down")

        notify(observer, "github_data_fetched")

        observer.record.assert_called_once()
