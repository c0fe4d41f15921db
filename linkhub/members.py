import logging

from peewee import DatabaseError

from linkhub.errors import InternalError, NotFound
from linkhub.ids import new_id
from linkhub.models import Feed, FeedItem
from linkhub.payloads import SelectedFeeds, SingleList

logger = logging.getLogger(__name__)


def _exists(feed_id) -> bool:
    return Feed.select().where(Feed.id == feed_id).exists()


def _insert(feed_id, profile) -> str:
    item_id = new_id()
    FeedItem.insert(
        id=item_id,
        feed=feed_id,
        linkedin_id=profile.linkedin_id,
        name=profile.name,
        photo=profile.photo,
        url=profile.url,
        headline=profile.headline,
    ).execute()
    return item_id


class MembershipService:
    """Adds and removes profiles from feeds."""

    def __init__(self, store):
        self.store = store

    def add(self, feed_id, profile) -> str:
        if not _exists(feed_id):
            raise NotFound("Feed not found")
        try:
            return _insert(feed_id, profile)
        except DatabaseError as e:
            logger.error("Error adding item to %s: %s", feed_id, e, exc_info=True)
            raise InternalError(str(e)) from e

    def remove(self, feed_id, ref) -> int:
        """Delete items of ``feed_id`` whose id or linkedin_id is ``ref``."""
        return (
            FeedItem
            .delete()
            .where(
                (FeedItem.feed == feed_id)
                & ((FeedItem.id == ref) | (FeedItem.linkedin_id == ref))
            )
            .execute()
        )

    def add_to_feeds(self, feed_ids, profile) -> int:
        """Add ``profile`` to each existing feed in ``feed_ids``; skip the rest."""
        added = 0
        with self.store.atomic():
            for feed_id in feed_ids:
                if _exists(feed_id):
                    _insert(feed_id, profile)
                    added += 1
        return added

    def add_profiles(self, feed_id, profiles) -> int:
        if not _exists(feed_id):
            logger.info("List %s not found, nothing added", feed_id)
            return 0
        with self.store.atomic():
            for profile in profiles:
                _insert(feed_id, profile)
        logger.info("Added %d profile(s) to list %s", len(profiles), feed_id)
        return len(profiles)

    def bulk_add(self, request) -> int:
        try:
            if isinstance(request, SelectedFeeds):
                return self.add_to_feeds(request.selected, request.profile)
            if isinstance(request, SingleList):
                return self.add_profiles(request.listId, request.profiles)
        except DatabaseError as e:
            logger.error("Error adding profiles in bulk: %s", e, exc_info=True)
            raise InternalError(str(e)) from e
        raise TypeError(f"unsupported bulk add request: {type(request).__name__}")
