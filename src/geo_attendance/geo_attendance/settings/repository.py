from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Setting


class SettingsRepository(Protocol):
    """Key-value store for application settings.

    Each call is independent; there is no multi-key transaction.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Insert the key or overwrite its current value (upsert)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Setting]:
        raise NotImplementedError
