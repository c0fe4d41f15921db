import datetime
import logging

from linkhub.models import Comment, Stat

logger = logging.getLogger(__name__)

REPORT_DAYS = 30


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


class EngagementService:
    """Comment log, per-day engagement counters and streaks.

    ``today`` arguments default to the current UTC date.
    """

    def __init__(self, store):
        self.store = store

    def record(self, today=None) -> None:
        day = (today or utc_today()).isoformat()
        (Stat
         .insert(date=day, count=1)
         .on_conflict(conflict_target=[Stat.date], update={Stat.count: Stat.count + 1})
         .execute())
        logger.debug("Recorded engagement for %s", day)

    def add_comment(self, post_text="", comment_text="", post_urn="", today=None) -> int:
        comment = Comment.create(
            post_text=post_text or "",
            comment_text=comment_text or "",
            post_urn=post_urn or "",
        )
        self.record(today)
        return comment.id

    def streak(self, today=None) -> int:
        """Count consecutive days, ending today, with a positive count."""
        day = today or utc_today()
        streak = 0
        while True:
            row = Stat.get_or_none(Stat.date == day.isoformat())
            if row is None or row.count <= 0:
                break
            streak += 1
            day -= datetime.timedelta(days=1)
        return streak

    def today_count(self, today=None) -> int:
        row = Stat.get_or_none(Stat.date == (today or utc_today()).isoformat())
        return row.count if row else 0

    def daily_report(self, limit=REPORT_DAYS) -> list:
        rows = Stat.select().order_by(Stat.date.desc()).limit(limit)
        return [{"date": r.date, "count": r.count} for r in rows]
