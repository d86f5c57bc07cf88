import pytest

from prawn import logger


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send log output to a temporary file instead of ~/.prawn."""
    log_path = tmp_path / "prawn.log"
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(log_path))
    return log_path


@pytest.fixture
def notes_dir(tmp_path):
    """A notes directory holding a.md, b.md and c.md plus a file that is not a note."""
    directory = tmp_path / "notes"
    directory.mkdir()
    (directory / "a.md").write_text("alpha\nsecond line", encoding="utf-8")
    (directory / "b.md").write_text("bravo", encoding="utf-8")
    (directory / "c.md").write_text("", encoding="utf-8")
    (directory / "todo.txt").write_text("not a note", encoding="utf-8")
    return directory
