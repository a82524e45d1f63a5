# gasmflux/core/models.py

from dataclasses import dataclass, field
from typing import Optional

BASE_URL = "https://soundgasm.net"

@dataclass(frozen=True)
class Uploader:
    """An account on the site, identified by its (case-sensitive) name."""
    name: str
    base_url: str = field(default=BASE_URL, compare=False)

    @property
    def url(self) -> str:
        """The uploader's listing page."""
        return f"{self.base_url}/u/{self.name}"

@dataclass
class AudioItem:
    """
    Metadata for a single audio post.

    `play_count` is None when it is not known yet. It is only available from
    the uploader's listing page, never from the post's own page.
    """
    title: str
    description: str
    uploader: Uploader
    audio_url: str = ""  # Direct link to the .m4a, empty if not resolved
    post_url: str = ""  # The post's page, used to match listing entries
    play_count: Optional[int] = None
