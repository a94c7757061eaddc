"""Persisted client state: the voter token and per-report choices."""

import json
import secrets
from abc import ABC, abstractmethod
from pathlib import Path

import logfire

VOTER_ID_KEY = "satya_voter_id"
USER_VOTES_KEY = "satya_user_votes"


class KeyValueStore(ABC):
    """String key-value store that survives restarts."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class InMemoryStore(KeyValueStore):
    """Store kept in a dict, for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStore(KeyValueStore):
    """Store persisted as one JSON object in a file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logfire.warn("Unreadable client state", path=str(self.path), error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")


def new_voter_id() -> str:
    return f"v_{secrets.token_hex(10)}"


class LocalVoteState:
    """Voter token and last-known choice per report (1, -1 or 0 for none)."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def voter_id(self) -> str:
        """Return the device's voter token, creating it on first use."""
        voter_id = self.store.get(VOTER_ID_KEY)
        if not voter_id:
            voter_id = new_voter_id()
            self.store.set(VOTER_ID_KEY, voter_id)
        return voter_id

    def choices(self) -> dict[str, int]:
        raw = self.store.get(USER_VOTES_KEY)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if v in (1, -1, 0)}

    def choice_for(self, report_id: str) -> int:
        return self.choices().get(report_id, 0)

    def set_choice(self, report_id: str, choice: int) -> None:
        choices = self.choices()
        choices[report_id] = choice
        self.store.set(USER_VOTES_KEY, json.dumps(choices))
