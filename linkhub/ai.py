import json
import logging

from openai import AsyncOpenAI

from linkhub import config

logger = logging.getLogger(__name__)

THINKING_PROMPT = (
    "Generate 3 different engaging LinkedIn comments for this post. Reply ONLY in JSON: "
    '{"comment_left":"your first comment here","comment_center":"your second comment here",'
    '"comment_right":"your third comment here"}. Each comment should be natural, 1-3 sentences, '
    "no hashtags, no brackets, no labels. The first should agree/congratulate, the second should "
    "ask a thoughtful question, the third should share an insight. Same language as the post."
)
COMMENT_PROMPT = (
    "Generate a natural, engaging LinkedIn comment. 2-3 sentences max, no hashtags. "
    "Same language as the post."
)
REPLY_PROMPT = (
    "Generate a natural reply to this LinkedIn comment. 1-2 sentences, no hashtags. Same language."
)
REWRITE_PROMPT = (
    "Rewrite this LinkedIn comment to be more engaging. Keep same language, tone, and length."
)
SUMMARY_PROMPT = (
    "Summarize this LinkedIn post in 2-3 concise sentences. Same language as the post. "
    "Be direct and informative."
)

MISSING_KEY_TEXT = "Configure OPENAI_KEY"
NO_SUMMARY_TEXT = "No content to summarize."
SUMMARY_UNAVAILABLE = "Summary unavailable."

THINKING_KEYS = ("comment_left", "comment_center", "comment_right")


class CommentWriter:
    """Thin wrapper over the Chat Completions API."""

    def __init__(self, api_key=None, model=None, client=None):
        self.api_key = config.OPENAI_KEY if api_key is None else api_key
        self.model = model or config.OPENAI_MODEL
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self):
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _complete(self, system, text, max_tokens, **kwargs) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": text},
            ],
            max_tokens=max_tokens,
            **kwargs,
        )
        return (response.choices[0].message.content or "").strip()

    async def thinking(self, text: str) -> dict:
        if not self.configured:
            return {"comment_left": MISSING_KEY_TEXT, "comment_center": "", "comment_right": ""}
        try:
            raw = await self._complete(
                THINKING_PROMPT, text, 400, response_format={"type": "json_object"}
            )
            parsed = json.loads(raw or "{}")
            if not isinstance(parsed, dict):
                parsed = {}
        except Exception as e:
            logger.error("Thinking generation failed: %s", e, exc_info=True)
            parsed = {}
        return {k: parsed.get(k) or "" for k in THINKING_KEYS}

    async def comment(self, text: str, is_reply=False):
        """Return the generated comment, or ``None`` when the call failed."""
        system = REPLY_PROMPT if is_reply else COMMENT_PROMPT
        try:
            return await self._complete(system, text, 200)
        except Exception as e:
            logger.error("Comment generation failed: %s", e, exc_info=True)
            return None

    async def rewrite(self, text: str) -> str:
        if not self.configured:
            return ""
        try:
            return await self._complete(REWRITE_PROMPT, text, 200)
        except Exception as e:
            logger.error("Rewrite failed: %s", e, exc_info=True)
            return ""

    async def summary(self, text: str) -> str:
        if not self.configured or not text:
            return NO_SUMMARY_TEXT
        try:
            return await self._complete(SUMMARY_PROMPT, text, 200) or SUMMARY_UNAVAILABLE
        except Exception as e:
            logger.error("Summary failed: %s", e, exc_info=True)
            return SUMMARY_UNAVAILABLE
