"""Credential entity representing a resolved username/password pair."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credential:
    """Publish credentials for a single realm and host."""

    realm: str
    host: str
    username: str
    password: str = field(repr=False)

    def describe(self, *, include_username: bool = True) -> str:
        """Loggable description that never includes the password."""
        if include_username:
            return f"{self.username}@{self.host} (realm '{self.realm}')"
        return f"{self.host} (realm '{self.realm}')"
