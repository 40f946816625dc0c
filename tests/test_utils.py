import logging

import pytest
from rich.logging import RichHandler

from clia.utils import get_program_invocation, running_in_container, setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers after setup_logging replaces them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode(root_logger):
    setup_logging(mode="cli")
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.handlers[0].level == logging.WARNING


def test_mode_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("CLIA_LOG_MODE", "json")
    setup_logging()
    handler = root_logger.handlers[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler, logging.StreamHandler)


def test_json_file_logging(root_logger, tmp_path):
    log_file = tmp_path / "clia.log"
    setup_logging(mode="json", log_filename=str(log_file))
    logging.getLogger("clia").info("scanned")
    for handler in root_logger.handlers:
        handler.flush()
    assert '"message": "scanned"' in log_file.read_text(encoding="UTF-8")


def test_plain_file_logging(root_logger, tmp_path):
    log_file = tmp_path / "clia.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logging.getLogger("clia").debug("scanned")
    for handler in root_logger.handlers:
        handler.flush()
    assert "[clia] [DEBUG] scanned" in log_file.read_text(encoding="UTF-8")


def test_invalid_mode(root_logger):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/nonexistent/search_tool.py"])
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python /nonexistent/search_tool.py"


def test_get_program_invocation_on_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/search"])
    monkeypatch.setattr("shutil.which", lambda script: script)
    assert get_program_invocation() == "search"


@pytest.mark.parametrize(
    "cgroup, expected",
    [
        ("0::/system.slice/docker-abc.scope\n", True),
        ("0::/kubepods/besteffort/pod1\n", True),
        ("0::/user.slice\n", False),
    ],
)
def test_running_in_container(monkeypatch, cgroup, expected):
    monkeypatch.setattr("pathlib.Path.read_text", lambda self, encoding: cgroup)
    assert running_in_container() is expected


def test_running_in_container_without_proc(monkeypatch):
    def missing(self, encoding):
        raise FileNotFoundError(str(self))

    monkeypatch.setattr("pathlib.Path.read_text", missing)
    assert running_in_container() is False
