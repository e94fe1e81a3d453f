import io
import logging
from pathlib import Path
from typing import Optional

import pytest
from git import Repo


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's configuration and environment out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for name in (
        "GIT_SEMVER_PREFIX",
        "GIT_SEMVER_FORMAT",
        "GIT_SEMVER_TARGET",
        "GIT_SEMVER_MATCH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("gitsemver")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


# git fixtures


class GitRepoBuilder:
    """Builds throwaway repositories with controlled commit dates."""

    def __init__(self, path: Path):
        self.path = path
        self.repo = Repo.init(path)
        with self.repo.config_writer() as writer:
            writer.set_value("user", "name", "Test User")
            writer.set_value("user", "email", "test@example.com")
        self._count = 0

    def commit(self, message: Optional[str] = None):
        """Commit a new file, one day after the previous commit."""
        self._count += 1
        name = f"file{self._count}.txt"
        (self.path / name).write_text(f"content {self._count}\n")
        self.repo.index.add([name])

        date = f"2020-01-{self._count:02d}T12:00:00"
        return self.repo.index.commit(
            message or f"Commit {self._count}",
            author_date=date,
            commit_date=date,
        )

    def tag(self, name: str, commit=None, message: Optional[str] = None):
        """Create a lightweight tag, or an annotated one if message is given."""
        ref = commit if commit is not None else self.repo.head.commit
        if message is None:
            return self.repo.create_tag(name, ref=ref)
        return self.repo.create_tag(name, ref=ref, message=message)

    @property
    def head(self) -> str:
        return self.repo.head.commit.hexsha


@pytest.fixture
def git_repo(tmp_path):
    """Fixture providing an empty repository to build history in."""
    builder = GitRepoBuilder(tmp_path / "repo")
    yield builder
    builder.repo.close()
