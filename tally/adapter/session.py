"""Session store implementations."""

from tally.domain.service import SessionStore


class InMemorySessionStore(SessionStore):
    """Dict-backed session for tests and non-HTTP callers."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
