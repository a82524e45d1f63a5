# gasmflux/core/extractors.py
"""
Functions that pull individual fields out of soundgasm pages.

Item pages carry the title, description, uploader and the media URL.
Listing pages (``/u/<name>``) carry one ``div.sound-details`` block per
upload, which is the only place the play count is shown.
"""

import re
from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .errors import NotFoundError, ParseError

# The player is configured by a script block on the item page:
#   $(this).jPlayer("setMedia", {
#       m4a: "https://media.soundgasm.net/sounds/filename.m4a"
#   });
AUDIO_URL_PATTERN = re.compile(r'm4a: "(.*?)"')
PLAY_COUNT_LABEL = re.compile(r"Play Count:\s+")
DIGITS = re.compile(r"[0-9]+")

def parse_html(content: str) -> BeautifulSoup:
    return BeautifulSoup(content, "html.parser")

def parse_body(content: str) -> Tag:
    """Parse the HTML content and navigate to the <body> tag."""
    body = parse_html(content).body
    if body is None:
        raise NotFoundError("Page has no <body>")
    return body

def _text(element: Tag) -> str:
    """
    Node text with surrounding whitespace stripped.

    The page markup indents text inside its containers, so leading and
    trailing whitespace is dropped, including any the uploader typed.
    Inner whitespace is kept as is.
    """
    return element.get_text().strip()

def _required(element: Optional[Tag], description: str) -> Tag:
    if element is None:
        raise NotFoundError(f"Could not find {description}")
    return element

def extract_title(body: Tag) -> str:
    """The title lives in a <div class="jp-title"> node."""
    return _text(_required(body.select_one("div.jp-title"), "title (div.jp-title)"))

def extract_description(body: Tag) -> str:
    """The description is the <p> child of a <div class="jp-description"> node."""
    container = _required(body.select_one("div.jp-description"), "description (div.jp-description)")
    paragraph = _required(container.find("p", recursive=False), "description paragraph (div.jp-description > p)")
    return _text(paragraph)

def extract_uploader_name(body: Tag) -> str:
    """The uploader is the <a> child of the first <div> directly under <body>."""
    container = _required(body.find("div", recursive=False), "uploader container (body > div)")
    link = _required(container.find("a", recursive=False), "uploader link (body > div > a)")
    return _text(link)

def extract_audio_url(content: str) -> str:
    """Extract the direct audio URL from the raw page text."""
    match = AUDIO_URL_PATTERN.search(content)
    if match is None:
        raise NotFoundError('Could not find an audio URL (m4a: "...")')
    return match.group(1)

def parse_play_count(text: str) -> int:
    """Turn "Play Count: 42" into 42. Zero is a real count, not a missing one."""
    remainder = PLAY_COUNT_LABEL.sub("", text).strip()
    if not DIGITS.fullmatch(remainder):
        raise ParseError(text)
    return int(remainder)

def strip_broken_breaks(content: str) -> str:
    """Listing pages contain stray </br> tags that confuse the parser."""
    return content.replace("</br>", "")

def parse_sound_details(node: Tag) -> Tuple[str, str, str, int]:
    """
    Read one listing entry.

    <div class="sound-details">
        <a href="LINK-TO-PAGE">AUDIO TITLE</a>
        <span class="soundDescription">DESCRIPTION</span>
        <span class="playCount">Play Count: #</span>
    </div>

    Returns:
        (post_url, title, description, play_count)
    """
    link = _required(node.select_one("a"), "sound link (div.sound-details a)")
    post_url = link.get("href")
    if not post_url:
        raise NotFoundError("Sound link has no href")
    description = _required(node.select_one("span.soundDescription"), "span.soundDescription")
    play_count = _required(node.select_one("span.playCount"), "span.playCount")
    return str(post_url), _text(link), _text(description), parse_play_count(_text(play_count))
