import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
BOT_RESPONSE_DELAY_MS = int(os.getenv("BOT_RESPONSE_DELAY_MS", "1000"))
BOT_NAME = os.getenv("BOT_NAME", "Chat Assistant")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SERVICE_TITLE = "external_chat_api"
SERVICE_VERSION = "0.1.0"
HEALTH_MESSAGE = "Salesforce Chat API is running!"
STORED_IN = "external_database"
