import datetime
import logging

from peewee import (
    AutoField,
    BooleanField,
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    Model,
    SqliteDatabase,
    TextField,
)

logger = logging.getLogger(__name__)


def casefold(value):
    return None if value is None else str(value).casefold()


def utcnow():
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class Feed(Model):
    id = TextField(primary_key=True)
    name = TextField()
    is_private = BooleanField(default=False)
    position = IntegerField(default=0)
    is_in_onboarding = BooleanField(default=False)
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField(default=utcnow)

    class Meta:
        table_name = "feeds"


class FeedItem(Model):
    id = TextField(primary_key=True)
    feed = ForeignKeyField(Feed, backref="items", on_delete="CASCADE", column_name="feed_id")
    linkedin_id = TextField(default="")
    name = TextField(default="")
    photo = TextField(default="")
    url = TextField(default="")
    headline = TextField(default="")
    created_at = DateTimeField(default=utcnow)

    class Meta:
        table_name = "feed_items"


class Comment(Model):
    id = AutoField()
    post_text = TextField(default="")
    comment_text = TextField(default="")
    post_urn = TextField(default="")
    created_at = DateTimeField(default=utcnow)

    class Meta:
        table_name = "comments"


class Stat(Model):
    date = TextField(primary_key=True)  # YYYY-MM-DD, UTC
    count = IntegerField(default=0)

    class Meta:
        table_name = "stats"


MODELS = [Feed, FeedItem, Comment, Stat]


class Store:
    """The SQLite database behind every service.

    Construct once, ``open()`` at startup and ``close()`` at shutdown. Opening
    binds the models to this database and creates missing tables.
    """

    def __init__(self, path):
        self.path = str(path)
        self.db = SqliteDatabase(
            self.path,
            pragmas={"journal_mode": "wal", "foreign_keys": 1},
        )
        # SQLite LIKE and lower() only fold ASCII.
        self.db.register_function(casefold, "casefold", 1)

    def open(self):
        self.db.bind(MODELS)
        self.db.connect(reuse_if_open=True)
        self.db.create_tables(MODELS, safe=True)
        logger.info("Store opened at %s", self.path)
        return self

    def close(self):
        if not self.db.is_closed():
            self.db.close()
            logger.info("Store closed")

    def atomic(self):
        return self.db.atomic()
