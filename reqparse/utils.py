import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union
from colorama import Fore, Style, init as colorama_init
import config

from .models import ParsedRequest

def setup_logging():
    colorama_init(autoreset=True)

    # Create logs directory
    log_dir = Path(config.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers = []

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColorFormatter())
    handlers.append(console_handler)

    # File Handler (Rotating)
    file_handler = RotatingFileHandler(
        log_dir / "reqparse.log",
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    logging.basicConfig(level=config.LOG_LEVEL, handlers=handlers)

class ColorFormatter(logging.Formatter):
    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        color = self.COLORS.get(record.levelno, "")
        reset = Style.RESET_ALL
        time_str = self.formatTime(record, "%H:%M:%S")
        level = f"{record.levelname:<8}"
        msg = record.getMessage()
        return f"{Fore.WHITE}{time_str}{reset} {color}{level}{reset} {msg}"

def format_parsed_block(source: str, parsed: ParsedRequest) -> str:
    payload = json.dumps(parsed.to_dict(), indent=config.JSON_INDENT, ensure_ascii=False)
    return "\n".join(
        [
            "=" * 70,
            source,
            "",
            payload,
            "=" * 70,
            "",
        ]
    )

class ResultSink:
    def __init__(self, target: Optional[Union[str, bool]]) -> None:
        """
        target:
            None       -> disabled
            True       -> console dump
            "file"     -> append to results/<file> (or absolute path)
        """
        if target is None:
            self.mode = "off"
            self.path = None
        elif target is True:
            self.mode = "console"
            self.path = None
        else:
            dest = Path(target)
            if not dest.is_absolute():
                dest = Path(config.RESULTS_DIR) / dest
            dest.parent.mkdir(parents=True, exist_ok=True)
            self.mode = "file"
            self.path = dest

    def enabled(self) -> bool:
        return self.mode != "off"

    def write(self, source: str, parsed: ParsedRequest) -> None:
        block = format_parsed_block(source, parsed)
        if self.mode == "console":
            print(block)
        elif self.mode == "file" and self.path:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(block)
