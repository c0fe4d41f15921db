import logging
from typing import Optional

from linkhub.ids import new_id
from linkhub.models import Feed, utcnow
from linkhub.views import ReadModels, feed_view

logger = logging.getLogger(__name__)

DEFAULT_FEED_NAME = "New List"


class FeedService:
    """Create, edit, reorder, delete and synchronize feeds."""

    def __init__(self, store, views: Optional[ReadModels] = None):
        self.store = store
        self.views = views or ReadModels(store)

    def create(self, name=None, is_private=False) -> dict:
        feed = Feed.create(
            id=new_id(),
            name=name or DEFAULT_FEED_NAME,
            is_private=is_private,
            position=Feed.select().count(),
        )
        logger.info("Created feed %s (%s)", feed.id, feed.name)
        return feed_view(feed, [])

    def update(self, feed_id: str, changes: dict) -> None:
        """Apply a partial update; an unknown id changes nothing."""
        fields = {
            getattr(Feed, k): v
            for k, v in changes.items()
            if k in ("name", "is_private", "position")
        }
        if not fields:
            return
        fields[Feed.updated_at] = utcnow()
        Feed.update(fields).where(Feed.id == feed_id).execute()

    def delete(self, feed_id: str) -> None:
        deleted = Feed.delete().where(Feed.id == feed_id).execute()
        if deleted:
            logger.info("Deleted feed %s", feed_id)

    def reorder(self, positions) -> None:
        """Set ``position`` for each ``(feed_id, position)`` pair."""
        now = utcnow()
        with self.store.atomic():
            for feed_id, position in positions:
                (Feed
                 .update(position=position, updated_at=now)
                 .where(Feed.id == feed_id)
                 .execute())

    def sync(self, descriptors) -> list:
        """Upsert each descriptor by id and return every feed with its items.

        Feeds missing from ``descriptors`` are left alone. A descriptor without
        an id always creates a new feed.
        """
        created = updated = 0
        with self.store.atomic():
            for desc in descriptors:
                feed = Feed.get_or_none(Feed.id == desc.id) if desc.id else None
                if feed is not None:
                    if desc.name is not None:
                        feed.name = desc.name
                    feed.is_private = desc.is_private
                    feed.position = desc.position
                    feed.updated_at = utcnow()
                    feed.save()
                    updated += 1
                else:
                    Feed.create(
                        id=desc.id or new_id(),
                        name=desc.name or DEFAULT_FEED_NAME,
                        is_private=desc.is_private,
                        position=desc.position,
                    )
                    created += 1
        logger.info("Synchronized lists: %d created, %d updated", created, updated)
        return self.views.feeds()
