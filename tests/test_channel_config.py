# FILE: tests/test_channel_config.py
"""Tests for the JSON config store and the channel registry."""

import json

import pytest

from aibot.storage.channel_config import (
    BotConfig,
    ChannelRegistry,
    ConfigStoreError,
    JsonConfigStore,
)


class MemoryStore:
    def __init__(self, config=None, fail=False):
        self.config = config or BotConfig()
        self.fail = fail
        self.saves = []

    def load(self):
        return self.config

    def save(self, config):
        if self.fail:
            raise ConfigStoreError("disk full")
        self.saves.append(config)


class TestJsonConfigStore:
    def test_missing_file_is_empty(self, tmp_path):
        config = JsonConfigStore(str(tmp_path / "config.json")).load()
        assert config.ai_channels == []
        assert config.token is None

    def test_reads_original_layout(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"token": "t", "aiChannels": ["1", 2], "prefix": "!"}))

        config = JsonConfigStore(str(path)).load()

        assert config.token == "t"
        assert config.ai_channels == ["1", "2"]

    def test_save_round_trip_keeps_extra_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"token": "t", "aiChannels": [], "prefix": "!"}))
        store = JsonConfigStore(str(path))

        config = store.load()
        store.save(config.model_copy(update={"ai_channels": ["42"]}))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"token": "t", "aiChannels": ["42"], "prefix": "!"}
        assert list(tmp_path.iterdir()) == [path]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigStoreError):
            JsonConfigStore(str(path)).load()

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "state" / "config.json"
        JsonConfigStore(str(path)).save(BotConfig(ai_channels=["7"]))
        assert json.loads(path.read_text())["aiChannels"] == ["7"]


class TestChannelRegistry:
    def test_enable(self):
        store = MemoryStore()
        registry = ChannelRegistry(store)

        assert registry.enable(123) is True
        assert registry.is_enabled("123")
        assert registry.is_enabled(123)
        assert store.saves[-1].ai_channels == ["123"]

    def test_enable_twice(self):
        registry = ChannelRegistry(MemoryStore(BotConfig(ai_channels=["5"])))
        assert registry.enable("5") is False

    def test_disable(self):
        store = MemoryStore(BotConfig(ai_channels=["5", "6"]))
        registry = ChannelRegistry(store)

        assert registry.disable("5") is True
        assert registry.channels == ("6",)
        assert store.saves[-1].ai_channels == ["6"]

    def test_disable_unknown(self):
        store = MemoryStore()
        registry = ChannelRegistry(store)
        assert registry.disable("9") is False
        assert store.saves == []

    def test_failed_save_leaves_state_unchanged(self):
        registry = ChannelRegistry(MemoryStore(fail=True))
        with pytest.raises(ConfigStoreError):
            registry.enable("1")
        assert not registry.is_enabled("1")

    def test_persists_through_json_store(self, tmp_path):
        path = str(tmp_path / "config.json")
        ChannelRegistry(JsonConfigStore(path)).enable("77")
        assert ChannelRegistry(JsonConfigStore(path)).is_enabled("77")
