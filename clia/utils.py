# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py
Program name and logging helpers for programs built on clia.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """The program title shown in help text: the command name, or `python script`."""
    script = sys.argv[0]
    if shutil.which(script):
        return Path(script).name
    return f"python {script}" if "python" in sys.executable else script


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records to the console, and optionally to a file.

    Args:
        mode (str | None): "cli" for Rich console logs, "json" for JSON lines.
            Defaults to `CLIA_LOG_MODE`, then to "json" inside a container and
            "cli" elsewhere.
        log_filename (str | None): Also write DEBUG and above to this file, in
            the same format family as the console.
        console_log_level (int): Console threshold. Scan traces are DEBUG, so
            the default WARNING only shows user errors.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("CLIA_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in ("cli", "json"):
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False, markup=False, log_time_format="[%Y-%m-%d %H:%M:%S]"
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
        )
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        if mode == "json":
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logging.getLogger("clia").debug("Logging initialized in '%s' mode.", mode)
