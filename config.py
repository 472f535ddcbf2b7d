"""Basic settings for parsing raw HTTP requests from text files.

These defaults can be adjusted to fit your environment.
You can also override them using environment variables (e.g. for Docker).
"""
import os
from pathlib import Path

def get_env(key, default, cast=None):
    val = os.getenv(key, default)
    if cast and val is not None:
        try:
            return cast(val)
        except (ValueError, TypeError):
            return default
    return val

def get_bool(key, default):
    val = os.getenv(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes", "on")

# Folder that holds *.txt files with raw HTTP requests.
REQUESTS_DIR = Path(get_env("REQUESTS_DIR", Path(__file__).parent / "raw_requests"))

# Folder where parsed records are appended when --output <file> is used.
RESULTS_DIR = Path(get_env("RESULTS_DIR", Path(__file__).parent / "results"))

# Skip files named example*.txt when scanning REQUESTS_DIR.
SKIP_EXAMPLE_FILES = get_bool("SKIP_EXAMPLE_FILES", True)

# Max parallel workers when parsing request files.
PARSE_WORKERS = get_env("PARSE_WORKERS", 10, int)

# Indentation of the JSON dump written by --output.
JSON_INDENT = get_env("JSON_INDENT", 2, int)

# Logging.
LOG_DIR = Path(get_env("LOG_DIR", "logs"))
LOG_LEVEL = get_env("LOG_LEVEL", "INFO").upper()
LOG_MAX_BYTES = get_env("LOG_MAX_BYTES", 5 * 1024 * 1024, int)  # 5 MB
LOG_BACKUP_COUNT = get_env("LOG_BACKUP_COUNT", 3, int)
