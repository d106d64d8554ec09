"""Keychain account entity representing a declared credential lookup."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class KeychainAccount:
    """An account whose credentials should be fetched from the keychain."""

    realm: str
    address: str
    username: str | None = None

    def __str__(self) -> str:
        if self.username:
            return f"{self.username}@{self.address} (realm '{self.realm}')"
        return f"{self.address} (realm '{self.realm}')"

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Self:
        """Factory method to create an account from a configuration mapping."""
        try:
            realm = raw["realm"]
            address = raw["address"]
        except KeyError as e:
            msg = f"Keychain account is missing required field {e.args[0]!r}: {raw}"
            raise ValueError(msg) from e

        if not isinstance(realm, str) or not isinstance(address, str):
            msg = f"Keychain account fields 'realm' and 'address' must be strings: {raw}"
            raise ValueError(msg)

        username = raw.get("username")
        if username is not None and not isinstance(username, str):
            msg = f"Keychain account field 'username' must be a string: {raw}"
            raise ValueError(msg)

        return cls(realm=realm, address=address, username=username or None)
