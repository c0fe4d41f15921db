import logging

from peewee import fn

from linkhub.errors import NoContent
from linkhub.models import Comment, Feed, FeedItem

logger = logging.getLogger(__name__)

COMMENT_PAGE_SIZE = 50
NO_PROFILES_MESSAGE = "No profiles in your lists yet. Add some profiles first."


def item_view(item):
    return {
        "id": item.id,
        "feed_id": item.feed_id,
        "linkedin_id": item.linkedin_id,
        "name": item.name,
        "photo": item.photo,
        "url": item.url,
        "headline": item.headline,
        "created_at": item.created_at,
    }


def feed_view(feed, items):
    return {
        "id": feed.id,
        "name": feed.name,
        "is_private": bool(feed.is_private),
        "position": feed.position,
        "is_in_onboarding": bool(feed.is_in_onboarding),
        "created_at": feed.created_at,
        "updated_at": feed.updated_at,
        # No access model: the local user administers every feed.
        "is_admin": True,
        "items": [item_view(i) for i in items],
    }


def comment_view(comment):
    return {
        "id": comment.id,
        "post_text": comment.post_text,
        "comment_text": comment.comment_text,
        "post_urn": comment.post_urn,
        "created_at": comment.created_at,
    }


class ReadModels:
    """Builds the response shapes for feeds, comments and the bulk export."""

    def __init__(self, store):
        self.store = store

    def items_of(self, feed_id):
        return list(
            FeedItem
            .select()
            .where(FeedItem.feed == feed_id)
            .order_by(FeedItem.created_at.desc())
        )

    def feed(self, feed):
        return feed_view(feed, self.items_of(feed.id))

    def feeds(self, search=""):
        query = Feed.select()
        if search:
            query = query.where(fn.casefold(Feed.name).contains(search.casefold()))
        return [self.feed(f) for f in query.order_by(Feed.position)]

    def comments(self, streak):
        rows = (
            Comment
            .select()
            .order_by(Comment.created_at.desc(), Comment.id.desc())
            .limit(COMMENT_PAGE_SIZE)
        )
        return {
            "comments": [comment_view(c) for c in rows],
            "nextPaginationToken": None,
            "streakCounter": streak,
        }

    def export_all(self):
        """Flatten every item of every feed into post-shaped records."""
        total = FeedItem.select().count()
        if total == 0:
            raise NoContent(NO_PROFILES_MESSAGE)

        rows = (
            FeedItem
            .select(FeedItem, Feed)
            .join(Feed)
            .order_by(Feed.position, FeedItem.created_at.desc())
        )
        posts = []
        for idx, item in enumerate(rows):
            posts.append({
                "id": f"urn:li:activity:local-{item.id}-{idx}",
                "content": "",
                "date": item.created_at.isoformat(),
                "profile": {
                    "name": item.name or "",
                    "headline": item.headline or "",
                    "url": item.url or "",
                    "imageUrl": item.photo or "",
                },
                "imageUrl": None,
                "reactionCount": 0,
                "commentCount": 0,
                "videoUrl": None,
                "carouselPdfUrl": None,
            })
        logger.info("Exported %d profiles from all lists", total)
        return {
            "success": True,
            "posts": posts,
            "totalProfiles": total,
            "totalPosts": len(posts),
        }
