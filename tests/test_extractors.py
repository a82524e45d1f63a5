import pytest

from gasmflux.core.errors import NotFoundError, ParseError
from gasmflux.core.extractors import (
    extract_audio_url,
    extract_description,
    extract_title,
    extract_uploader_name,
    parse_body,
    parse_html,
    parse_play_count,
    parse_sound_details,
    strip_broken_breaks,
)
from conftest import load_page

@pytest.fixture
def item_page():
    return load_page("item_page.html")

@pytest.fixture
def body(item_page):
    return parse_body(item_page)

def sound_details(inner):
    return parse_html(f'<div class="sound-details">{inner}</div>').select_one("div.sound-details")

def test_extract_title(body):
    assert extract_title(body) == "Rainy Evening"

def test_extract_description(body):
    assert extract_description(body) == "Soft rain on a tin roof"

def test_extract_uploader_name(body):
    assert extract_uploader_name(body) == "alice"

def test_extract_audio_url(item_page):
    assert extract_audio_url(item_page) == "https://media.soundgasm.net/sounds/abc123.m4a"

def test_extract_audio_url_strips_quotes():
    page = 'setMedia", { m4a: "https://media.example.net/sounds/abc.m4a" });'
    assert extract_audio_url(page) == "https://media.example.net/sounds/abc.m4a"

def test_extract_audio_url_takes_first_match():
    page = 'm4a: "https://a.example/1.m4a"\nm4a: "https://a.example/2.m4a"'
    assert extract_audio_url(page) == "https://a.example/1.m4a"

def test_extract_audio_url_ignores_similar_keys():
    page = 'supplied: "m4a", xm4a:"nope", m4a_url: "nope", m4a: "https://a.example/yes.m4a"'
    assert extract_audio_url(page) == "https://a.example/yes.m4a"

def test_extract_audio_url_missing():
    with pytest.raises(NotFoundError):
        extract_audio_url('<script>supplied: "m4a"</script>')

def test_parse_body_requires_body():
    with pytest.raises(NotFoundError):
        parse_body("<p>just a fragment</p>")

def test_extract_title_missing():
    with pytest.raises(NotFoundError):
        extract_title(parse_body("<html><body><div>nothing</div></body></html>"))

def test_extract_description_missing_paragraph():
    body = parse_body('<html><body><div class="jp-description">bare text</div></body></html>')
    with pytest.raises(NotFoundError):
        extract_description(body)

def test_extract_description_missing_container():
    with pytest.raises(NotFoundError):
        extract_description(parse_body("<html><body><p>orphan</p></body></html>"))

def test_extract_uploader_name_needs_link_in_first_div():
    body = parse_body('<html><body><div>no link</div><div><a href="/u/bob">bob</a></div></body></html>')
    with pytest.raises(NotFoundError):
        extract_uploader_name(body)

def test_extract_uploader_name_without_div():
    with pytest.raises(NotFoundError):
        extract_uploader_name(parse_body("<html><body><p>empty</p></body></html>"))

@pytest.mark.parametrize("text, expected", [
    ("Play Count: 42", 42),
    ("Play Count: 0", 0),
    ("Play Count:   7", 7),
])
def test_parse_play_count(text, expected):
    assert parse_play_count(text) == expected

@pytest.mark.parametrize("text", ["Play Count: N/A", "Play Count: -3", "Play Count: ", "Play Count: 1.5"])
def test_parse_play_count_invalid(text):
    with pytest.raises(ParseError) as excinfo:
        parse_play_count(text)
    assert excinfo.value.text == text

def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_play_count("Play Count: lots")

def test_strip_broken_breaks():
    assert strip_broken_breaks("a</br>b</br></br>c<br/>") == "abc<br/>"

def test_parse_sound_details():
    node = sound_details(
        '<a href="/u/alice/123-My-Clip">My Clip</a>'
        '<span class="soundDescription">A test clip</span>'
        '<span class="playCount">Play Count: 42</span>'
    )
    assert parse_sound_details(node) == ("/u/alice/123-My-Clip", "My Clip", "A test clip", 42)

def test_parse_sound_details_missing_play_count():
    node = sound_details('<a href="/u/alice/x">X</a><span class="soundDescription">d</span>')
    with pytest.raises(NotFoundError):
        parse_sound_details(node)

def test_parse_sound_details_missing_href():
    node = sound_details(
        '<a>X</a><span class="soundDescription">d</span><span class="playCount">Play Count: 1</span>'
    )
    with pytest.raises(NotFoundError):
        parse_sound_details(node)

def test_extracted_text_drops_only_edge_whitespace():
    body = parse_body(
        '<html><body><div class="jp-description"><p>\n   two  spaces  inside \n</p></div></body></html>'
    )
    assert extract_description(body) == "two  spaces  inside"
