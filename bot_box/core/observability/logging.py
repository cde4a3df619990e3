"""
Structured JSON Logging for Simulation Sessions
Console diagnostics plus optional JSON run files for offline inspection.

Logs are grouped by session_id in run-specific files when LOG_DIR is set.
"""

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

APP_NAME = "BotBox"

CONSOLE_FORMAT = "[%(asctime)s] " + APP_NAME + " %(levelname)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class StructuredLogger:
    """
    Provides structured JSON logging grouped by session_id.

    Console output always goes through the stdlib logger for the service.
    File output is only produced when a log directory is configured:

        LOG_DIR/<subfolder>/<service>_YYYY-MM-DD.jsonl
        LOG_DIR/runs/YYYY-MM-DD/<session_id>.json

    Run entries are held in memory until end_session writes the run file once.

    Run file format: {
        "session_id": "...",
        "start_time": "...",
        "end_time": "...",
        "logs": [
            {"ts": "...", "service": "...", "level": "...", "message": "...", ...},
            ...
        ]
    }
    """

    # Class-level cache for run data (session_id -> log entries)
    _run_cache: Dict[str, Dict[str, Any]] = {}
    _cache_lock = threading.Lock()

    # Service to subfolder mapping
    _SERVICE_FOLDERS = {
        "parser": "commands",
        "robot": "robot",
        "executor": "robot",
        "table": "table",
        "layout": "table",
        "command_file": "instructions",
        "cli": "session",
    }

    def __init__(self, service_name: str, log_dir: Optional[str] = None):
        """
        Initialize structured logger for a specific service.

        Args:
            service_name: Component name (robot, executor, cli, etc.)
            log_dir: Directory for JSON log files (default: $LOG_DIR, unset disables files)
        """
        self.service_name = service_name

        configured_dir = log_dir or os.getenv("LOG_DIR")
        self.log_dir = Path(configured_dir) if configured_dir else None

        level = os.getenv("LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, got {level!r}")

        self.logger = logging.getLogger(f"bot_box.{service_name}")
        self.logger.setLevel(level)
        self.logger.propagate = False

        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(
                logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)
            )
            self.logger.addHandler(console_handler)

    @property
    def service_log_file(self) -> Optional[Path]:
        """Service-specific JSON-lines file, or None when file logging is off."""
        if self.log_dir is None:
            return None
        subfolder = self._SERVICE_FOLDERS.get(self.service_name, "other")
        today = datetime.now().strftime("%Y-%m-%d")
        return self.log_dir / subfolder / f"{self.service_name}_{today}.jsonl"

    def _get_run_file_path(self, session_id: str) -> Path:
        """Get the file path for a specific run."""
        today = datetime.now().strftime("%Y-%m-%d")
        date_dir = self.log_dir / "runs" / today
        date_dir.mkdir(parents=True, exist_ok=True)
        return date_dir / f"{session_id}.json"

    def end_session(self, session_id: str) -> Optional[Path]:
        """
        Write the grouped run file for a session and drop it from the cache.

        Returns:
            Path of the run file, or None when nothing was logged for the session
        """
        with self._cache_lock:
            run_data = self._run_cache.pop(session_id, None)

        if run_data is None or self.log_dir is None:
            return None

        run_data["end_time"] = _utc_now()
        run_file = self._get_run_file_path(session_id)

        # Atomic write
        temp_file = run_file.with_suffix(".tmp")
        with open(temp_file, "w", encoding="utf-8") as f:
            json.dump(run_data, f, indent=2)
        temp_file.replace(run_file)
        return run_file

    def log_json(
        self,
        level: str,
        message: str,
        session_id: Optional[str] = None,
        **extra_fields: Any
    ) -> None:
        """
        Write a log entry to the console and, if configured, to JSON files.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Human-readable log message
            session_id: Simulation session identifier for grouped run files
            **extra_fields: Additional context-specific fields
        """
        log_method = getattr(self.logger, level.lower(), self.logger.info)
        extra_msg = " | ".join(f"{k}={v}" for k, v in extra_fields.items() if v is not None)
        full_message = f"{message} | {extra_msg}" if extra_msg else message
        log_method(full_message)

        if self.log_dir is None:
            return

        # Skip file output for entries the level filter drops
        if not self.logger.isEnabledFor(logging.getLevelName(level.upper())):
            return

        log_entry: Dict[str, Any] = {
            "ts": _utc_now(),
            "service": self.service_name,
            "level": level.upper(),
            "message": message,
        }
        for key, value in extra_fields.items():
            log_entry[key] = value if isinstance(value, (int, float, bool, type(None))) else str(value)

        if session_id:
            with self._cache_lock:
                if session_id not in self._run_cache:
                    self._run_cache[session_id] = {
                        "session_id": session_id,
                        "start_time": _utc_now(),
                        "end_time": None,
                        "logs": [],
                    }
                self._run_cache[session_id]["logs"].append(log_entry)

        # The service file is appended per entry; run files are written by end_session
        service_entry = dict(log_entry, session_id=session_id)
        service_file = self.service_log_file
        service_file.parent.mkdir(parents=True, exist_ok=True)
        with open(service_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(service_entry) + "\n")

    def debug(self, message: str, **kwargs):
        """Log DEBUG level message."""
        self.log_json("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log INFO level message."""
        self.log_json("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log WARNING level message."""
        self.log_json("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log ERROR level message."""
        self.log_json("ERROR", message, **kwargs)


def get_logger(service_name: str) -> StructuredLogger:
    """
    Factory function to get a structured logger for a service.

    Args:
        service_name: Component name (robot, executor, cli, etc.)

    Returns:
        StructuredLogger instance configured for the service

    Example:
        >>> logger = get_logger("robot")
        >>> logger.warning("Move rejected", session_id="abc-123", reason="OFF_TABLE")
    """
    return StructuredLogger(service_name)
