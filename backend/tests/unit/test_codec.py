"""Unit tests for the stored article encoding."""

import json
from datetime import datetime, timezone

import pytest

from blog_api.domain.entities import Article
from blog_api.infrastructure.database.codec import ArticleCodec, ArticleCodecError


def test_encoded_record_is_self_describing():
    when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    data = ArticleCodec().encode(Article(title="T", content="C", timestamp=when))

    record = json.loads(data)

    assert record["title"] == "T"
    assert record["content"] == "C"
    assert datetime.fromisoformat(record["timestamp"].replace("Z", "+00:00")) == when


def test_decode_restores_timestamp():
    codec = ArticleCodec()
    original = Article(title="T", content="C").stamped()
    assert codec.decode(codec.encode(original)) == original


@pytest.mark.parametrize("data", [b"", b"not json", b'{"content": "no title"}'])
def test_decode_rejects_malformed_records(data: bytes):
    with pytest.raises(ArticleCodecError):
        ArticleCodec().decode(data)
