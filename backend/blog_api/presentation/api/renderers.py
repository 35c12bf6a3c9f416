"""Response bodies for article listings — JSON by default, XML on request."""

import re
import xml.etree.ElementTree as ET

from fastapi import Response
from pydantic import TypeAdapter

from blog_api.application.schemas import ArticleResponse
from blog_api.domain.entities import Article
from blog_api.domain.exceptions import EncodingFailureError

_ARTICLE_LIST = TypeAdapter(list[ArticleResponse])

# Characters outside the XML 1.0 Char production
_XML_INVALID = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def wants_xml(accept: str | None) -> bool:
    """XML only when the client asks for text/xml and not also for JSON."""
    accept = accept or ""
    return "text/xml" in accept and "application/json" not in accept


def _xml_text(value: str) -> str:
    return _XML_INVALID.sub("\ufffd", value)


def articles_to_json(articles: list[Article]) -> bytes:
    items = _ARTICLE_LIST.validate_python(articles, from_attributes=True)
    return _ARTICLE_LIST.dump_json(items)


def articles_to_xml(articles: list[Article]) -> str:
    """Render ``<articles><article><title/>…</article></articles>``."""
    root = ET.Element("articles")
    for item in _ARTICLE_LIST.validate_python(articles, from_attributes=True):
        node = ET.SubElement(root, "article")
        for field, value in item.model_dump(mode="json").items():
            ET.SubElement(node, field).text = _xml_text("" if value is None else str(value))
    return ET.tostring(root, encoding="unicode")


def render_articles(articles: list[Article], accept: str | None) -> Response:
    """Build the listing response for the negotiated format."""
    try:
        if wants_xml(accept):
            return Response(content=articles_to_xml(articles), media_type="text/xml")
        return Response(content=articles_to_json(articles), media_type="application/json")
    except (TypeError, ValueError) as exc:
        raise EncodingFailureError(str(exc)) from exc
