"""End-to-end runs of the cleanup catalog against a fake machine."""

import os

import pytest

from devcleanup.core.config import Configuration
from devcleanup.core.orchestrator import run_cleanup
from devcleanup.core.section import CommandFailedError
from devcleanup.core.utils import get_size

from conftest import make_tree, snapshot

ALL_TOOLS = ["flutter", "npm", "yarn", "pnpm", "pod", "pip", "gem", "brew", "xcrun", "docker"]

HOME_FILES = {
    ".gradle/caches/modules-2/lib.jar": 5000,
    ".gradle/wrapper/dists/gradle-8.5/dist.zip": 9000,
    ".npm/_cacache/index/entry": 1200,
    "Library/Caches/pip/http/wheel": 3000,
    "Library/Caches/Google/AndroidStudio2024.1/index": 700,
    "Library/Developer/Xcode/DerivedData/App-abc/Build/app": 8000,
    "Library/Developer/CoreSimulator/Devices/device.plist": 300,
    "Library/Application Support/Code/CachedData/blob": 400,
    "Documents/keep.txt": 50,
}

PROJECT_FILES = {
    "build/app.apk": 2000,
    "android/.gradle/file-system.probe": 100,
    "lib/main.dart": 80,
}

REMOVED = [
    ".gradle/caches",
    ".gradle/wrapper/dists",
    "Library/Caches/pip",
    "Library/Caches/Google/AndroidStudio2024.1",
    "Library/Developer/Xcode/DerivedData",
    "Library/Application Support/Code/CachedData",
]


@pytest.fixture
def populated(home, project):
    make_tree(home, HOME_FILES)
    make_tree(project, PROJECT_FILES)


def test_empty_machine_skips_everything(make_env, reporter, stream):
    env = make_env()

    total = run_cleanup(Configuration(), env, reporter)

    assert total == 0
    # Only the tolerated global gradle stop is attempted
    assert env.commands == [["gradle", "--stop"]]
    output = stream.getvalue()
    assert "▶ Starting dev cleanup (dry-run: false, include-xcode: false, include-docker: false, aggressive: false)" in output
    assert "▶ Disk before:" in output
    assert "▶ Disk after:" in output
    assert "~/.gradle/caches — not found, skipping." in output
    assert "CocoaPods not installed — skipping." in output
    assert "Homebrew not installed — skipping." in output
    assert "Xcode cleanup not requested (use --include-xcode)." in output
    assert "Docker cleanup not requested (use --include-docker)." in output
    assert "✓ Cleanup completed. Estimated freed: 0.0 B (plus tool-level cleanups)." in output


def test_dry_run_changes_nothing(populated, tmp_path, make_env, reporter, stream):
    env = make_env(tools=ALL_TOOLS)
    before = snapshot(tmp_path)
    config = Configuration(dry_run=True, include_xcode=True, include_docker=True, aggressive=True)

    total = run_cleanup(config, env, reporter)

    assert total == 0
    assert snapshot(tmp_path) == before
    assert env.executed == []
    output = stream.getvalue()
    assert "(dry-run) not executing" in output
    assert "! Dry run completed. No files were removed." in output
    assert "Cleanup completed" not in output


def test_derived_data_dry_run_reports_size(populated, make_env, reporter, stream, monkeypatch):
    monkeypatch.setattr("devcleanup.core.executor.get_size", lambda path: 500 * 1024 * 1024)
    config = Configuration(dry_run=True, include_xcode=True)

    run_cleanup(config, make_env(), reporter)

    output = stream.getvalue()
    assert "Xcode DerivedData — 500.0 MB" in output
    assert "! Dry run completed. No files were removed." in output


def test_full_run_removes_caches_and_totals(populated, home, project, make_env, reporter, stream):
    expected = sum(get_size(os.path.join(str(home), path)) for path in REMOVED + [".npm/_cacache"])
    expected += get_size(os.path.join(str(project), "build"), os.path.join(str(project), "android", ".gradle"))
    env = make_env(tools=["xcrun", "npm"])

    total = run_cleanup(Configuration(include_xcode=True), env, reporter)

    assert total == expected
    for path in REMOVED:
        assert not os.path.exists(os.path.join(str(home), path))
    assert not os.path.exists(os.path.join(str(project), "build"))
    assert not os.path.exists(os.path.join(str(home), ".npm", "_cacache"))
    assert os.path.exists(os.path.join(str(home), "Documents", "keep.txt"))
    assert os.path.exists(os.path.join(str(home), "Library", "Developer", "CoreSimulator", "Devices", "device.plist"))
    assert os.path.exists(os.path.join(str(project), "lib", "main.dart"))
    assert ["xcrun", "simctl", "delete", "unavailable"] in env.commands
    assert ["npm", "cache", "clean", "--force"] in env.commands


def test_second_run_is_a_no_op(populated, make_env, reporter, stream):
    config = Configuration(include_xcode=True, aggressive=True)
    env = make_env(tools=["xcrun"])
    run_cleanup(config, env, reporter)

    assert run_cleanup(config, env, reporter) == 0


def test_unwrapped_command_failure_stops_the_run(populated, home, make_env, reporter, stream):
    make_tree(home, {"Library/Logs/CoreSimulator/sim.log": 100})
    env = make_env(tools=["xcrun"], returncodes={"xcrun": 1})

    with pytest.raises(CommandFailedError):
        run_cleanup(Configuration(include_xcode=True), env, reporter)

    # Removed before the failing command, kept after it
    assert not os.path.exists(os.path.join(str(home), "Library", "Developer", "Xcode", "DerivedData"))
    assert os.path.exists(os.path.join(str(home), "Library", "Logs", "CoreSimulator", "sim.log"))
    assert "Disk after:" not in stream.getvalue()


def test_docker_prunes_when_enabled(make_env, reporter):
    env = make_env(tools=["docker"])

    run_cleanup(Configuration(include_docker=True), env, reporter)

    assert env.commands[-2:] == [
        ["docker", "system", "prune", "-f"],
        ["docker", "builder", "prune", "-af"],
    ]
