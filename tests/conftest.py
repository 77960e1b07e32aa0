"""Shared fixtures: a fake machine with a temporary home and project directory."""

import io
import os
from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from devcleanup.core.console import Reporter
from devcleanup.core.environment import DiskUsage, Environment

GIB = 1024 * 1024 * 1024


class FakeEnvironment(Environment):
    """Environment with a fixed set of installed tools that records every command."""

    def __init__(self, home: str, cwd: str, tools: Iterable[str] = (),
                 returncodes: Optional[Dict[str, int]] = None,
                 outputs: Optional[Dict[Tuple[str, ...], str]] = None):
        super().__init__(home=home, cwd=cwd)
        self.tools = set(tools)
        self.returncodes = returncodes or {}
        self.outputs = outputs or {}
        self.executed: List[Tuple[List[str], Optional[str]]] = []
        self.captured: List[List[str]] = []

    def which(self, tool: str) -> Optional[str]:
        if tool in self.tools:
            return f"/usr/local/bin/{tool}"
        return None

    def execute(self, argv: List[str], cwd: Optional[str] = None) -> int:
        self.executed.append((list(argv), cwd))
        if argv[0] != "sh" and argv[0] not in self.tools:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return self.returncodes.get(argv[0], 0)

    def capture(self, argv: List[str]) -> Optional[str]:
        self.captured.append(list(argv))
        return self.outputs.get(tuple(argv))

    def disk_usage(self, path: str = "/") -> DiskUsage:
        return DiskUsage(500 * GIB, 200 * GIB, 300 * GIB)

    @property
    def commands(self) -> List[List[str]]:
        return [argv for argv, _ in self.executed]


def make_tree(root, files: Dict[str, int]) -> None:
    """Create files (relative path -> size in bytes) under root."""
    for relative, size in files.items():
        path = os.path.join(str(root), relative)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(os.urandom(size))


def snapshot(root) -> Dict[str, bytes]:
    """Map every path under root to its content (directories map to b'')."""
    result = {}
    for dirpath, dirnames, filenames in os.walk(str(root)):
        for d in dirnames:
            result[os.path.relpath(os.path.join(dirpath, d), str(root))] = b""
        for f in filenames:
            fp = os.path.join(dirpath, f)
            with open(fp, "rb") as fh:
                result[os.path.relpath(fp, str(root))] = fh.read()
    return result


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def make_env(home, project):
    def factory(**kwargs) -> FakeEnvironment:
        return FakeEnvironment(str(home), str(project), **kwargs)
    return factory


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def reporter(stream):
    return Reporter(stream=stream, color=False)
