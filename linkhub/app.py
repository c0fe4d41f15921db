import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from linkhub import config, stubs
from linkhub.ai import MISSING_KEY_TEXT, CommentWriter
from linkhub.engagement import EngagementService
from linkhub.errors import InternalError, InvalidShape, NoContent, NotFound
from linkhub.lists import FeedService
from linkhub.members import MembershipService
from linkhub.models import Store
from linkhub.payloads import (
    CommentUpsert,
    FeedCreate,
    FeedUpdate,
    GenerateRequest,
    Profile,
    ReorderRequest,
    SyncListsRequest,
    decode_bulk_add,
)
from linkhub.views import ReadModels

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)

OK = {"success": True}


def create_app(db_path=None, writer=None) -> FastAPI:
    """Build the HTTP app around a store at ``db_path`` (defaults to config)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = Store(db_path or config.DB_PATH).open()
        views = ReadModels(store)
        app.state.store = store
        app.state.views = views
        app.state.feeds = FeedService(store, views)
        app.state.members = MembershipService(store)
        app.state.engagement = EngagementService(store)
        app.state.writer = writer or CommentWriter()
        logger.info("LinkHub local server ready, SQLite DB: %s", store.path)
        logger.info(
            "OpenAI key: %s",
            "configured" if app.state.writer.configured else "NOT SET (set OPENAI_KEY env var)",
        )
        yield
        store.close()

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(InternalError)
    async def internal_error(request: Request, exc: InternalError):
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(NoContent)
    async def no_content(request: Request, exc: NoContent):
        return JSONResponse(content={"success": False, "message": str(exc)})

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return """<pre>
    LinkHub local server
    Lists, comments and streaks for the LinkHub extension
    </pre>"""

    # Feeds / lists
    @app.get("/feeds")
    async def list_feeds(request: Request, search: str = ""):
        return request.app.state.views.feeds(search)

    @app.post("/feeds")
    async def create_feed(request: Request, data: FeedCreate):
        return request.app.state.feeds.create(data.name, data.is_private)

    # Registered before /feeds/{feed_id} so "items" is not taken for an id.
    @app.put("/feeds/items")
    async def bulk_items(request: Request, data: dict):
        return _bulk_add(request, data)

    @app.post("/feeds/feed-items")
    async def feed_items(request: Request, data: dict):
        logger.info("[feed-items] keys: %s", sorted(data.keys()))
        return _bulk_add(request, data)

    @app.put("/feeds/{feed_id}")
    async def update_feed(request: Request, feed_id: str, data: FeedUpdate):
        request.app.state.feeds.update(feed_id, data.changes())
        return OK

    @app.delete("/feeds/{feed_id}")
    @app.post("/feeds/{feed_id}/remove")
    async def delete_feed(request: Request, feed_id: str):
        request.app.state.feeds.delete(feed_id)
        return OK

    @app.post("/feeds/reorder")
    async def reorder_feeds(request: Request, data: ReorderRequest):
        request.app.state.feeds.reorder((f.id, f.position) for f in data.feeds)
        return OK

    @app.post("/feeds/update-lists")
    async def update_lists(request: Request, data: SyncListsRequest):
        return {"success": True, "data": request.app.state.feeds.sync(data.lists)}

    @app.post("/feeds/open-all-lists")
    async def open_all_lists(request: Request):
        return request.app.state.views.export_all()

    # Feed items (members)
    @app.post("/feeds/{feed_id}/items")
    async def add_item(request: Request, feed_id: str, profile: Profile):
        item_id = request.app.state.members.add(feed_id, profile)
        return {"success": True, "id": item_id}

    @app.delete("/feeds/{feed_id}/items/{item_id}")
    async def remove_item(request: Request, feed_id: str, item_id: str):
        request.app.state.members.remove(feed_id, item_id)
        return OK

    # Comments and statistics
    @app.post("/comments/upsert")
    async def upsert_comment(request: Request, data: CommentUpsert):
        request.app.state.engagement.add_comment(data.post_text, data.comment_text, data.post_urn)
        return OK

    @app.get("/comments")
    async def list_comments(request: Request):
        state = request.app.state
        return state.views.comments(state.engagement.streak())

    @app.get("/comments/streaks")
    async def streaks(request: Request):
        streak = request.app.state.engagement.streak()
        return {"streakCounter": streak, "consecutiveDays": streak}

    @app.get("/comments/count")
    async def today_count(request: Request):
        return {"count": request.app.state.engagement.today_count()}

    @app.get("/statistics/daily")
    async def daily_stats(request: Request):
        return {"data": request.app.state.engagement.daily_report()}

    # AI
    @app.post("/comments/generate-thinking")
    async def generate_thinking(request: Request, data: GenerateRequest):
        return await request.app.state.writer.thinking(data.post_first())

    @app.post("/comments/generate")
    async def generate_comment(request: Request, data: GenerateRequest):
        state = request.app.state
        if not state.writer.configured:
            return {"comment": MISSING_KEY_TEXT}
        comment = await state.writer.comment(data.post_first(), data.is_reply_to_comment)
        if comment is None:
            return {"comment": ""}
        state.engagement.record()
        return {"comment": comment}

    @app.post("/comments/rewrite")
    async def rewrite_comment(request: Request, data: GenerateRequest):
        return {"comment": await request.app.state.writer.rewrite(data.comment_first())}

    @app.post("/posts/summary")
    async def summarize_post(request: Request, data: GenerateRequest):
        text = data.post_text or data.postContent or ""
        return {"summary": await request.app.state.writer.summary(text)}

    app.include_router(stubs.router)

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    async def unrecognized(request: Request, path: str):
        logger.info("[unrecognized] %s /%s", request.method, path)
        return {}

    return app


def _bulk_add(request: Request, data: dict):
    try:
        variant = decode_bulk_add(data)
    except InvalidShape as e:
        logger.warning("[feed-items] %s", e)
        return OK
    request.app.state.members.bulk_add(variant)
    return OK


app = create_app()


def main():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
