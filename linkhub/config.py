import os

from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("LINKHUB_DB_PATH", "linkhub.db")
HOST = os.getenv("LINKHUB_HOST", "127.0.0.1")
PORT = int(os.getenv("LINKHUB_PORT", 3456))

OPENAI_KEY = os.getenv("OPENAI_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
