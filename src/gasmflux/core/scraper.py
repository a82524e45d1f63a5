# gasmflux/core/scraper.py

from typing import Iterator, Optional, Protocol

import httpx
from bs4 import Tag

from .config import Settings
from .errors import NotFoundError
from .extractors import (
    extract_audio_url,
    extract_description,
    extract_title,
    extract_uploader_name,
    parse_body,
    parse_html,
    parse_sound_details,
    strip_broken_breaks,
)
from .fetch import PageFetcher
from .logging import get_logger
from .models import BASE_URL, AudioItem, Uploader

logger = get_logger(__name__)

class Fetcher(Protocol):
    def fetch(self, url: str) -> str: ...

class AudioListing:
    """
    The uploads on an uploader's listing page, in page order.

    Iterating fetches the page again every time; nothing is kept between
    iterations. A malformed entry raises and ends the iteration.
    """
    def __init__(self, client: "SoundgasmClient", uploader: Uploader, with_audio_url: bool = True):
        self.client = client
        self.uploader = uploader
        self.with_audio_url = with_audio_url

    def __iter__(self) -> Iterator[AudioItem]:
        content = strip_broken_breaks(self.client.fetcher.fetch(self.uploader.url))
        nodes = parse_html(content).select("div.sound-details")
        logger.debug(f"Found {len(nodes)} uploads for '{self.uploader.name}'")
        for node in nodes:
            yield self.client.parse_listing_entry(node, self.uploader.name, self.with_audio_url)

    def __repr__(self) -> str:
        return f"<AudioListing(uploader='{self.uploader.name}', with_audio_url={self.with_audio_url})>"

class SoundgasmClient:
    """
    Read-only access to soundgasm posts and uploader listings.

    Every method fetches what it needs; the only state kept between calls is
    a play count written into an AudioItem the caller already holds.

    Pass either a `fetcher` or an httpx `client` for the default fetcher to
    use, not both.
    """
    def __init__(self, base_url: str = BASE_URL, fetcher: Optional[Fetcher] = None,
                 client: Optional[httpx.Client] = None):
        if fetcher is not None and client is not None:
            raise ValueError("Pass either a fetcher or an httpx client, not both.")
        self.base_url = base_url.rstrip("/")
        self.fetcher = fetcher if fetcher else PageFetcher(client=client)

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.Client] = None) -> "SoundgasmClient":
        fetcher = PageFetcher(client=client, timeout=settings.timeout, user_agent=settings.user_agent)
        return cls(base_url=settings.base_url, fetcher=fetcher)

    def get_uploader(self, name: str) -> Uploader:
        return Uploader(name=name, base_url=self.base_url)

    def _absolute(self, url: str) -> str:
        return str(httpx.URL(self.base_url).join(url))

    # --- uploader listings ---

    def parse_listing_entry(self, node: Tag, uploader_name: str, with_audio_url: bool = True) -> AudioItem:
        """
        Build an AudioItem from one <div class="sound-details"> block.

        With `with_audio_url`, the post's own page is fetched to find the
        media link, which costs one request per entry.
        """
        post_url, title, description, play_count = parse_sound_details(node)
        audio_url = self.get_audio_url(self._absolute(post_url)) if with_audio_url else ""
        return AudioItem(
            title=title,
            description=description,
            uploader=self.get_uploader(uploader_name),
            audio_url=audio_url,
            post_url=post_url,
            play_count=play_count,  # since we're on the uploader page, this is known
        )

    def audios(self, uploader: Uploader, with_audio_url: bool = True) -> AudioListing:
        """Lazily iterate over the uploads listed on the uploader's page."""
        return AudioListing(self, uploader, with_audio_url)

    def total_uploads(self, uploader: Uploader) -> int:
        """Number of uploads made by this uploader."""
        return sum(1 for _ in self.audios(uploader, with_audio_url=False))

    def total_plays(self, uploader: Uploader) -> int:
        """Number of plays across all of this uploader's uploads."""
        return sum(audio.play_count or 0 for audio in self.audios(uploader, with_audio_url=False))

    # --- single posts ---

    def get(self, url: str) -> AudioItem:
        """
        Fetch a post page and return its metadata.

        The play count is not shown on the post page, so it is left as None;
        see get_play_count().
        """
        content = self.fetcher.fetch(url)
        body = parse_body(content)
        return AudioItem(
            title=extract_title(body),
            description=extract_description(body),
            uploader=self.get_uploader(extract_uploader_name(body)),
            audio_url=extract_audio_url(content),
            post_url=url,
            play_count=None,
        )

    def get_title(self, url: str) -> str:
        return extract_title(parse_body(self.fetcher.fetch(url)))

    def get_description(self, url: str) -> str:
        return extract_description(parse_body(self.fetcher.fetch(url)))

    def get_uploader_name(self, url: str) -> str:
        return extract_uploader_name(parse_body(self.fetcher.fetch(url)))

    def get_audio_url(self, url: str) -> str:
        """Get the direct audio URL for the post at the given url."""
        return extract_audio_url(self.fetcher.fetch(url))

    # --- play counts ---

    def _find_play_count(self, uploader: Uploader, post_url: str) -> int:
        for audio in self.audios(uploader, with_audio_url=False):
            if audio.post_url == post_url:
                logger.debug(f"Found {post_url} on '{uploader.name}' listing")
                return audio.play_count
        logger.debug(f"{post_url} is not listed on '{uploader.name}' listing")
        raise NotFoundError(f"No upload with URL {post_url} on {uploader.url}")

    def get_play_count(self, item: AudioItem, use_cache: bool = True) -> int:
        """
        Get the number of plays for an item.

        The count is looked up on the uploader's listing and stored on `item`
        itself. A stored count is reused unless `use_cache` is False.
        """
        if item.play_count is None or not use_cache:
            item.play_count = self._find_play_count(item.uploader, item.post_url)
        return item.play_count

    def get_play_count_by_url(self, url: str) -> int:
        """Get the number of plays for the post at the given url."""
        uploader = self.get_uploader(self.get_uploader_name(url))
        return self._find_play_count(uploader, url)

    def close(self) -> None:
        """Closes the underlying fetcher, if it can be closed."""
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "SoundgasmClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(base_url='{self.base_url}')>"
