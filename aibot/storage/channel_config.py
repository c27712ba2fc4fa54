"""Channel-enablement configuration and its JSON-file store.

Purpose of this abstraction:
    The bot answers only in channels an administrator enabled. That list lives
    in a flat JSON file (`config.json`), shared with the Discord token. This
    module models the file (`BotConfig`), persists it (`JsonConfigStore`) and
    exposes the channel operations used by `aibot.core.engine`
    (`ChannelRegistry`).

File format:
    `{"token": "...", "aiChannels": ["<channel id>", ...]}` plus any other keys,
    which are preserved on save. Written as 4-space indented UTF-8 JSON.

Concurrency and crash safety:
    Saves are serialized with a lock and written to a temporary file in the
    same directory, then moved over the target with `os.replace`. A crash
    mid-write leaves the previous file intact.

Failure handling:
    A missing file is an empty configuration. Unreadable or invalid content
    raises `ConfigStoreError`; write failures are logged and re-raised.
"""

import json
import logging
import os
import tempfile
import threading
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError


logger = logging.getLogger(__name__)


class ConfigStoreError(RuntimeError):
    """Raised when the configuration file cannot be read or written."""


class BotConfig(BaseModel):
    """Contents of the bot configuration file."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    token: str | None = None
    ai_channels: list[str] = Field(default_factory=list, alias="aiChannels")


class ConfigStore(Protocol):
    """Minimal persistence interface consumed by `ChannelRegistry`."""

    def load(self) -> BotConfig:
        ...

    def save(self, config: BotConfig) -> None:
        ...


class JsonConfigStore:
    """`ConfigStore` backed by one JSON file."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def load(self) -> BotConfig:
        if not os.path.exists(self.path):
            logger.info("Config file %s not found; starting with empty config", self.path)
            return BotConfig()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return BotConfig.model_validate(data)
        except (OSError, ValueError, ValidationError) as err:
            raise ConfigStoreError(f"Cannot read config file {self.path}: {err}") from err

    def save(self, config: BotConfig) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        data = config.model_dump(by_alias=True)

        with self._lock:
            tmp_path = None
            try:
                os.makedirs(directory, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(
                    prefix=".config-", suffix=".json", dir=directory
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=4)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, self.path)
                tmp_path = None
            except OSError as err:
                logger.exception("Failed to write config file %s", self.path)
                raise ConfigStoreError(f"Cannot write config file {self.path}") from err
            finally:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)


class ChannelRegistry:
    """Enabled-channel set backed by a `ConfigStore`.

    The configuration is loaded once. Mutations build an updated copy, persist
    it, and only then replace the in-memory value, so a failed save leaves the
    registry unchanged.
    """

    def __init__(self, store: ConfigStore):
        self._store = store
        self._lock = threading.Lock()
        self.config = store.load()

    @property
    def channels(self) -> tuple[str, ...]:
        return tuple(self.config.ai_channels)

    def is_enabled(self, channel_id) -> bool:
        return str(channel_id) in self.config.ai_channels

    def enable(self, channel_id) -> bool:
        """Enable a channel. Returns False when it was already enabled."""
        channel_id = str(channel_id)
        with self._lock:
            if channel_id in self.config.ai_channels:
                return False
            self._commit(self.config.ai_channels + [channel_id])
        logger.info("Enabled channels updated: %s", self.config.ai_channels)
        return True

    def disable(self, channel_id) -> bool:
        """Disable a channel. Returns False when it was not enabled."""
        channel_id = str(channel_id)
        with self._lock:
            if channel_id not in self.config.ai_channels:
                return False
            self._commit([c for c in self.config.ai_channels if c != channel_id])
        logger.info("Enabled channels updated: %s", self.config.ai_channels)
        return True

    def _commit(self, channels: list[str]) -> None:
        updated = self.config.model_copy(update={"ai_channels": channels})
        self._store.save(updated)
        self.config = updated
