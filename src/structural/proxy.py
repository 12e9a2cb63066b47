"""Proxy - stand in for another object to control access to it.

Problem:
    A third-party video library is slow and sends the same request to the
    network every time it is asked, even for videos the application has
    already fetched. The library itself cannot be changed.

Solution:
    Put a proxy with the same interface in front of the library. The proxy
    caches results and only forwards requests it has not answered before.
    Clients receive the proxy instead of the real service and cannot tell
    the difference.

Structure:
    - ``ThirdPartyYouTubeLib`` is the service interface.
    - ``ThirdPartyYouTubeClass`` is the real service.
    - ``CachedYouTubeClass`` is the caching proxy.
    - ``YouTubeManager`` is the client working through the interface.

Usage:
    - Lazy initialization of a heavyweight object (virtual proxy).
    - Access control, local execution of a remote service, request logging,
      or caching of results (caching proxy).

Advantages:
    - The service object is controlled without clients knowing.
    - The proxy works even if the service is not ready or available.
    - New proxies are introduced without changing the service or clients (open/closed).

Disadvantages:
    - More classes, and responses may be delayed or stale.
"""
from typing import Callable, Dict, List, Optional, Protocol

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ThirdPartyYouTubeLib(Protocol):
    def list_videos(self) -> List[str]:
        ...

    def get_video_info(self, video_id: str) -> str:
        ...

    def download_video(self, video_id: str) -> str:
        ...


class ThirdPartyYouTubeClass:
    """Real service. Counts every (simulated) remote call."""

    def __init__(self, catalog: Optional[Dict[str, str]] = None):
        self._catalog = catalog if catalog is not None else {
            "123": "Design patterns in 10 minutes",
            "456": "Refactoring legacy code",
        }
        self.remote_calls = 0

    def list_videos(self) -> List[str]:
        self.remote_calls += 1
        return sorted(self._catalog)

    def get_video_info(self, video_id: str) -> str:
        self.remote_calls += 1
        title = self._catalog.get(video_id, "unknown video")
        return f"Video {video_id}: {title}"

    def download_video(self, video_id: str) -> str:
        self.remote_calls += 1
        return f"video-{video_id}.mp4"


class CachedYouTubeClass:
    """Caching proxy: each distinct request reaches the service at most once."""

    def __init__(self, service: ThirdPartyYouTubeLib):
        self._service = service
        self._list_cache: Optional[List[str]] = None
        self._info_cache: Dict[str, str] = {}
        self._download_cache: Dict[str, str] = {}

    def list_videos(self) -> List[str]:
        if self._list_cache is None:
            self._list_cache = self._service.list_videos()
        return list(self._list_cache)

    def get_video_info(self, video_id: str) -> str:
        if video_id not in self._info_cache:
            self._info_cache[video_id] = self._service.get_video_info(video_id)
        return self._info_cache[video_id]

    def download_video(self, video_id: str) -> str:
        if video_id not in self._download_cache:
            logger.debug("Downloading video", video_id=video_id)
            self._download_cache[video_id] = self._service.download_video(video_id)
        return self._download_cache[video_id]

    def reset(self) -> None:
        self._list_cache = None
        self._info_cache.clear()
        self._download_cache.clear()


class YouTubeManager:
    def __init__(self, service: ThirdPartyYouTubeLib, output: Callable[[str], None] = print):
        self.service = service
        self._output = output

    def render_video_page(self, video_id: str) -> None:
        self._output(self.service.get_video_info(video_id))

    def render_list_panel(self) -> None:
        self._output(f"Videos: {', '.join(self.service.list_videos())}")

    def react_on_user_input(self) -> None:
        self.render_video_page("123")
        self.render_list_panel()


def run_demo(output: Callable[[str], None] = print) -> None:
    service = ThirdPartyYouTubeClass()
    manager = YouTubeManager(CachedYouTubeClass(service), output)

    manager.react_on_user_input()
    manager.react_on_user_input()
    output(f"Remote calls through the proxy: {service.remote_calls}")

    direct_service = ThirdPartyYouTubeClass()
    direct = YouTubeManager(direct_service, output)
    direct.react_on_user_input()
    direct.react_on_user_input()
    output(f"Remote calls without the proxy: {direct_service.remote_calls}")
