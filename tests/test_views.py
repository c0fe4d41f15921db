import datetime

import pytest

from linkhub.errors import NoContent
from linkhub.models import Comment, Feed, FeedItem


def test_feed_listing_orders_feeds_and_items(views):
    Feed.create(id="late", name="Late", position=5)
    Feed.create(id="early", name="Early", position=1)
    base = datetime.datetime(2026, 1, 1, 12, 0, 0)
    FeedItem.create(id="old", feed="early", name="Old", created_at=base)
    FeedItem.create(id="new", feed="early", name="New", created_at=base + datetime.timedelta(hours=1))

    listing = views.feeds()

    assert [f["id"] for f in listing] == ["early", "late"]
    assert [i["id"] for i in listing[0]["items"]] == ["new", "old"]
    assert listing[1]["items"] == []


def test_feed_listing_flags(views):
    Feed.create(id="f1", name="VIPs", is_private=True)

    feed = views.feeds()[0]

    assert feed["is_private"] is True
    assert feed["is_in_onboarding"] is False
    assert feed["is_admin"] is True


def test_feed_listing_search_is_case_insensitive(views):
    Feed.create(id="a", name="Founders")
    Feed.create(id="b", name="Investors")

    assert [f["id"] for f in views.feeds("FOUND")] == ["a"]
    assert [f["id"] for f in views.feeds("")] == ["a", "b"]


def test_comment_listing(views):
    base = datetime.datetime(2026, 1, 1)
    for n in range(55):
        Comment.create(post_text=f"post {n}", created_at=base + datetime.timedelta(minutes=n))

    listing = views.comments(streak=4)

    assert len(listing["comments"]) == 50
    assert listing["comments"][0]["post_text"] == "post 54"
    assert listing["nextPaginationToken"] is None
    assert listing["streakCounter"] == 4


def test_export_with_no_items_raises_no_content(views):
    Feed.create(id="f1", name="Empty")
    with pytest.raises(NoContent):
        views.export_all()


def test_export_flattens_items(views):
    Feed.create(id="f1", name="A", position=0)
    Feed.create(id="f2", name="B", position=1)
    FeedItem.create(id="i1", feed="f1", name="Ana", headline="CEO", url="u1", photo="p1")
    FeedItem.create(id="i2", feed="f2", name="Bob")

    export = views.export_all()

    assert export["success"] is True
    assert export["totalProfiles"] == 2
    assert export["totalPosts"] == 2
    first = export["posts"][0]
    assert first["id"] == "urn:li:activity:local-i1-0"
    assert first["profile"] == {"name": "Ana", "headline": "CEO", "url": "u1", "imageUrl": "p1"}
    assert first["reactionCount"] == 0
    assert first["commentCount"] == 0
    assert first["imageUrl"] is None
    assert export["posts"][1]["id"] == "urn:li:activity:local-i2-1"


def test_feed_listing_search_folds_non_ascii(views):
    Feed.create(id="a", name="Équipe Paris")
    Feed.create(id="b", name="Investors")
    assert [f["id"] for f in views.feeds("ÉQUIPE")] == ["a"]
    assert [f["id"] for f in views.feeds("équipe")] == ["a"]
