"""Tests for ConfigFileWatcher."""

import asyncio
import json
from pathlib import Path

import pytest
import watchfiles

from clipkeeper.config.channel import SettingsStore
from clipkeeper.config.watch import ConfigFileWatcher


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"history-size": 10}), encoding="utf-8")
    return path


class TestReload:
    """Tests for one-shot reloads."""

    def test_reload_applies_changes(self, config_file: Path, settings: SettingsStore) -> None:
        seen: list[object] = []
        settings.on_change("history-size", seen.append)
        watcher = ConfigFileWatcher(config_file, settings)

        config_file.write_text(json.dumps({"history-size": 3}), encoding="utf-8")

        assert watcher.reload() is True
        assert seen == [3]

    def test_removed_key_returns_to_default(
        self, config_file: Path, settings: SettingsStore
    ) -> None:
        """Keys dropped from the file fall back to their defaults."""
        settings.set("enable-panel-icon", False)
        watcher = ConfigFileWatcher(config_file, settings)

        assert watcher.reload() is True
        assert settings.get("enable-panel-icon") is True

    def test_invalid_file_keeps_previous_settings(
        self, config_file: Path, settings: SettingsStore
    ) -> None:
        settings.set("history-size", 4)
        watcher = ConfigFileWatcher(config_file, settings)

        config_file.write_text('{"history-size": ', encoding="utf-8")
        assert watcher.reload() is False

        config_file.write_text(json.dumps({"history-size": 0}), encoding="utf-8")
        assert watcher.reload() is False

        assert settings.get("history-size") == 4

    def test_missing_file_keeps_previous_settings(
        self, tmp_path: Path, settings: SettingsStore
    ) -> None:
        watcher = ConfigFileWatcher(tmp_path / "gone.json", settings)
        assert watcher.reload() is False
        assert settings.get("history-size") == 10


class TestFilter:
    """Tests for the change filter."""

    def test_matches_only_config_file(self, config_file: Path, settings: SettingsStore) -> None:
        watcher = ConfigFileWatcher(config_file, settings)
        other = str(config_file.parent / "notes.txt")

        assert watcher._matches(watchfiles.Change.modified, str(config_file))
        assert watcher._matches(watchfiles.Change.added, str(config_file))
        assert not watcher._matches(watchfiles.Change.deleted, str(config_file))
        assert not watcher._matches(watchfiles.Change.modified, other)

    def test_symlinked_config_matches_target(self, tmp_path: Path, settings: SettingsStore) -> None:
        """Edits to the target of a symlinked config are picked up."""
        dotfiles = tmp_path / "dotfiles"
        dotfiles.mkdir()
        target = dotfiles / "clipkeeper.json"
        target.write_text("{}", encoding="utf-8")
        link = tmp_path / "config.json"
        link.symlink_to(target)
        watcher = ConfigFileWatcher(link, settings)

        assert watcher._matches(watchfiles.Change.modified, str(target))
        assert not watcher._matches(watchfiles.Change.modified, str(dotfiles / "config.json"))


class TestLifecycle:
    """Tests for start/stop."""

    @pytest.mark.asyncio
    async def test_start_and_close(self, config_file: Path, settings: SettingsStore) -> None:
        watcher = ConfigFileWatcher(config_file, settings)
        watcher.start()
        assert watcher.is_running
        watcher.start()

        await watcher.aclose()
        assert not watcher.is_running

    @pytest.mark.asyncio
    async def test_missing_directory_ends_quietly(
        self, tmp_path: Path, settings: SettingsStore
    ) -> None:
        watcher = ConfigFileWatcher(tmp_path / "absent" / "config.json", settings)
        watcher.start()
        await watcher.aclose()
        assert not watcher.is_running

    def test_stop_before_start_is_safe(self, config_file: Path, settings: SettingsStore) -> None:
        ConfigFileWatcher(config_file, settings).stop()

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_file_edit_applies_live(
        self, config_file: Path, settings: SettingsStore
    ) -> None:
        """Rewriting the file while watching pushes the new values into settings."""
        watcher = ConfigFileWatcher(config_file, settings, debounce_ms=50)
        watcher.start()
        loop = asyncio.get_running_loop()
        deadline = loop.time() + 10.0
        try:
            # Rewrite until seen; the watch may not be armed on the first write
            while settings.get("history-size") != 2:
                assert loop.time() < deadline, "config edit never applied"
                config_file.write_text(json.dumps({"history-size": 2}), encoding="utf-8")
                await asyncio.sleep(0.25)
        finally:
            await watcher.aclose()

        assert not watcher.is_running

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_other_files_ignored_live(
        self, config_file: Path, settings: SettingsStore
    ) -> None:
        """Writing a sibling file never triggers a reload."""
        config_file.write_text(json.dumps({"history-size": 7}), encoding="utf-8")
        watcher = ConfigFileWatcher(config_file, settings, debounce_ms=50)
        watcher.start()
        try:
            for _ in range(4):
                (config_file.parent / "notes.json").write_text("{}", encoding="utf-8")
                await asyncio.sleep(0.25)
        finally:
            await watcher.aclose()

        assert settings.get("history-size") == 10
