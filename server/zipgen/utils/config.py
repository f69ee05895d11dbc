# zipgen/utils/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Template bundles and the form page, relative to the working directory by default
TEMPLATES_DIR = Path(os.environ.get("ZIPGEN_TEMPLATES_DIR", "templates"))
STATIC_DIR = Path(os.environ.get("ZIPGEN_STATIC_DIR", "static"))

HOST = os.environ.get("ZIPGEN_HOST", "127.0.0.1")
PORT = int(os.environ.get("ZIPGEN_PORT", 8080))
LOG_LEVEL = os.environ.get("ZIPGEN_LOG_LEVEL", "INFO").upper()

SERVICE_NAME = "zipgen"
