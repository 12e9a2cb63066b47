"""Tests for the caching video service proxy."""

from unittest.mock import Mock

from src.structural.proxy import (
    CachedYouTubeClass,
    ThirdPartyYouTubeClass,
    YouTubeManager,
    run_demo,
)


class TestCachedYouTubeClass:
    """Test that repeated requests are answered from the cache."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = ThirdPartyYouTubeClass()
        self.proxy = CachedYouTubeClass(self.service)

    def test_info_cached_per_video(self):
        """Each video id is fetched once, and ids do not evict each other."""
        first = self.proxy.get_video_info("123")
        self.proxy.get_video_info("456")
        again = self.proxy.get_video_info("123")
        assert first == again == "Video 123: Design patterns in 10 minutes"
        assert self.service.remote_calls == 2

    def test_download_cached(self):
        assert self.proxy.download_video("123") == "video-123.mp4"
        self.proxy.download_video("123")
        assert self.service.remote_calls == 1

    def test_list_cached_and_copied(self):
        videos = self.proxy.list_videos()
        videos.append("tampered")
        assert self.proxy.list_videos() == ["123", "456"]
        assert self.service.remote_calls == 1

    def test_reset_clears_caches(self):
        self.proxy.get_video_info("123")
        self.proxy.reset()
        self.proxy.get_video_info("123")
        assert self.service.remote_calls == 2

    def test_proxy_forwards_to_service(self):
        service = Mock()
        service.get_video_info.return_value = "info"
        proxy = CachedYouTubeClass(service)
        proxy.get_video_info("abc")
        proxy.get_video_info("abc")
        service.get_video_info.assert_called_once_with("abc")


class TestYouTubeManager:
    def test_client_works_with_either_implementation(self):
        lines = []
        YouTubeManager(ThirdPartyYouTubeClass(), lines.append).react_on_user_input()
        YouTubeManager(CachedYouTubeClass(ThirdPartyYouTubeClass()), lines.append).react_on_user_input()
        assert lines[:2] == lines[2:]


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert "Remote calls through the proxy: 2" in lines
    assert lines[-1] == "Remote calls without the proxy: 4"
