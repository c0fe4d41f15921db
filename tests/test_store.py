from linkhub.ids import new_id, to_base36
from linkhub.models import Feed, FeedItem, Stat


def test_pragmas_enable_wal_and_foreign_keys(store):
    assert store.db.execute_sql("PRAGMA journal_mode").fetchone()[0] == "wal"
    assert store.db.execute_sql("PRAGMA foreign_keys").fetchone()[0] == 1


def test_deleting_feed_cascades_to_items(store):
    feed = Feed.create(id="f1", name="VIPs")
    other = Feed.create(id="f2", name="Others")
    for i in range(3):
        FeedItem.create(id=f"i{i}", feed=feed, name=f"p{i}")
    FeedItem.create(id="keep", feed=other)

    Feed.delete().where(Feed.id == "f1").execute()

    for i in range(3):
        assert FeedItem.get_or_none(FeedItem.id == f"i{i}") is None
    assert FeedItem.get_or_none(FeedItem.id == "keep") is not None


def test_booleans_are_stored_as_integers(store):
    Feed.create(id="f1", name="Private", is_private=True)
    raw = store.db.execute_sql("SELECT is_private FROM feeds WHERE id = 'f1'").fetchone()[0]
    assert raw == 1
    assert Feed.get_by_id("f1").is_private is True


def test_stat_defaults(store):
    Stat.create(date="2026-01-01")
    assert Stat.get_by_id("2026-01-01").count == 0


def test_new_ids_are_prefixed_and_distinct():
    ids = {new_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(i.startswith("lhf_") for i in ids)


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
