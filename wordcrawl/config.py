import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")

DEFAULT_BASE_ADDRESS = "https://en.wikipedia.org/wiki/Microsoft"
DEFAULT_USER_AGENT = "WordCrawl/0.1"
DEFAULT_HTTP_TIMEOUT = 10
DEFAULT_MAX_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_INTERVAL = 1.0
DEFAULT_ANCHOR_ID = "History"
DEFAULT_END_NAME = "h2"
DEFAULT_LOG_FILE = "logfile.log"


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def log_file() -> Optional[str]:
	# WORDCRAWL_LOG_FILE="" disables the file handler; unset falls back to the default
	raw = os.getenv("WORDCRAWL_LOG_FILE")
	if raw is None:
		return DEFAULT_LOG_FILE
	return raw.strip() or None
