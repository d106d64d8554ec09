"""Git credential request value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CredentialRequest:
    """Request body sent to a git credential helper's ``get`` action."""

    protocol: str
    host: str
    realm: str
    username: str | None = None

    def to_lines(self) -> list[str]:
        """Key/value lines in git-credential order."""
        lines = [
            f"protocol={self.protocol}",
            f"host={self.host}",
            f"realm={self.realm}",
        ]
        if self.username:
            lines.append(f"username={self.username}")
        return lines

    def encode(self) -> bytes:
        """UTF-8 request body, newline separated without a trailing newline."""
        return "\n".join(self.to_lines()).encode("utf-8")
