"""Unit tests for listing content negotiation and XML rendering."""

import json
import xml.etree.ElementTree as ET

import pytest

from blog_api.domain.entities import Article
from blog_api.presentation.api.renderers import articles_to_xml, render_articles, wants_xml


@pytest.mark.parametrize(
    ("accept", "expected"),
    [
        (None, False),
        ("", False),
        ("application/json", False),
        ("text/xml", True),
        ("text/html, text/xml;q=0.9", True),
        ("text/xml, application/json", False),
        ("application/xml", False),
    ],
)
def test_wants_xml(accept, expected):
    assert wants_xml(accept) is expected


def test_xml_listing_shape():
    articles = [Article(title="A", content="x < y").stamped(), Article(title="B", content="").stamped()]

    root = ET.fromstring(articles_to_xml(articles))

    assert root.tag == "articles"
    items = root.findall("article")
    assert [item.findtext("title") for item in items] == ["A", "B"]
    assert items[0].findtext("content") == "x < y"
    assert items[0].findtext("timestamp")


def test_xml_replaces_characters_xml_cannot_carry():
    body = articles_to_xml([Article(title="bell\x07", content="C").stamped()])
    assert ET.fromstring(body).find("article").findtext("title") == "bell\ufffd"


def test_render_articles_defaults_to_json():
    response = render_articles([Article(title="A", content="C").stamped()], None)

    assert response.media_type == "application/json"
    payload = json.loads(response.body)
    assert payload[0]["title"] == "A"
    assert set(payload[0]) == {"title", "content", "timestamp"}
