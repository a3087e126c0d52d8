"""
Pytest configuration and fixtures for fsadmin tests.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fsadmin.core.config import FsAdminConfig, LoggingConfig, ToolsConfig
from fsadmin.platform.base import CommandResult, CommandRunner


SAMPLE_TUNE2FS_OUTPUT = """tune2fs 1.47.0 (5-Feb-2023)
Filesystem volume name:   <none>
Last mounted on:          <not available>
Filesystem UUID:          2b6c9fa1-1f0b-4c1e-9d3e-8d6b0f1a2c3d
Filesystem magic number:  0xEF53
Filesystem features:      has_journal ext_attr resize_inode dir_index
Default mount options:    user_xattr acl
Filesystem state:         clean
Inode count:              65536
Journal backup:           inode blocks
Default directory hash:   half_md4
Mount count:              0
Reserved blocks gid:      0 (group root)
Filesystem OS type:       Linux
Journal device:           (none)
"""


class FakeRunner(CommandRunner):
    """Records argument vectors and replays scripted results."""

    def __init__(self) -> None:
        super().__init__()
        self.commands: list[list[str]] = []
        self._results: list[tuple[int, str, str]] = []

    def queue(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._results.append((returncode, stdout, stderr))

    def run_command(self, command: list[str]) -> CommandResult:
        self.commands.append(list(command))
        returncode, stdout, stderr = self._results.pop(0) if self._results else (0, "", "")
        return CommandResult(
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
            command=command,
        )


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a runner that never spawns processes."""
    return FakeRunner()


@pytest.fixture
def tools_dir(tmp_path: Path) -> Path:
    """Directory standing in for /sbin with both mke2fs names present."""
    sbin = tmp_path / "sbin"
    sbin.mkdir()
    (sbin / "mke4fs").touch()
    (sbin / "mke2fs").touch()
    return sbin


@pytest.fixture
def sample_config(tmp_path: Path, tools_dir: Path) -> Generator[FsAdminConfig, None, None]:
    """Create a sample configuration for testing."""
    config = FsAdminConfig(
        logging=LoggingConfig(console_enabled=False, log_directory=tmp_path / "logs"),
        tools=ToolsConfig(
            mke2fs_candidates=[str(tools_dir / "mke4fs"), str(tools_dir / "mke2fs")],
        ),
    )
    yield config


@pytest.fixture
def session(sample_config: FsAdminConfig, fake_runner: FakeRunner) -> "Session":
    """Create a session backed by the fake runner."""
    from fsadmin.core.session import Session

    return Session(config=sample_config, runner=fake_runner)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


@pytest.fixture
def tune2fs_output() -> str:
    """Realistic ``tune2fs -l`` output, banner included."""
    return SAMPLE_TUNE2FS_OUTPUT
