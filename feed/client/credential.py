"""Persistent credential slot for the feed client.

The slot holds exactly one credential string, stored as issued (it may carry
a ``Bearer`` prefix).
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path

import logfire


class CredentialStore(ABC):
    """Abstract credential slot."""

    @abstractmethod
    def get(self) -> str | None:
        """Read the stored credential.

        Returns:
            Credential if present, None otherwise
        """
        pass

    @abstractmethod
    def set(self, credential: str) -> None:
        """Store a credential, replacing any previous one."""
        pass

    @abstractmethod
    def remove(self) -> None:
        """Remove the stored credential. No-op if none is stored."""
        pass


class InMemoryCredentialStore(CredentialStore):
    """Credential slot held in process memory."""

    def __init__(self, credential: str | None = None) -> None:
        self._credential = credential

    def get(self) -> str | None:
        return self._credential

    def set(self, credential: str) -> None:
        self._credential = credential

    def remove(self) -> None:
        self._credential = None


class FileCredentialStore(CredentialStore):
    """Credential slot backed by a JSON file.

    The file holds an object keyed by ``key`` so other client state can live
    alongside the credential.
    """

    def __init__(self, path: Path, key: str = "jwtToken") -> None:
        """Initialize file-backed store.

        Args:
            path: JSON file location (created on first write)
            key: Key the credential is stored under
        """
        self.path = path
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logfire.warn(
                "Credential file is not valid JSON, ignoring it",
                path=str(self.path),
                error=str(e),
            )
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get(self) -> str | None:
        value = self._read().get(self.key)
        return value if isinstance(value, str) and value else None

    def set(self, credential: str) -> None:
        data = self._read()
        data[self.key] = credential
        self._write(data)
        logfire.info("Credential stored", path=str(self.path))

    def remove(self) -> None:
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        self._write(data)
        logfire.info("Credential removed", path=str(self.path))
