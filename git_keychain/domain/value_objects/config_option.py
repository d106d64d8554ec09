"""Git configuration option value object."""

from dataclasses import dataclass

HELPER_BINARY_PREFIX = "git-credential-"


@dataclass(frozen=True, slots=True)
class GitConfigOption:
    """A parsed git configuration value, e.g. ``credential.helper``."""

    value: str
    is_shell_command: bool = False

    @property
    def helper_command(self) -> str:
        """Executable to invoke for this credential helper.

        Shell commands (``!cmd``) are used as-is and are not handed to a shell;
        helper names are expanded to ``git-credential-<name>``.
        """
        if self.is_shell_command:
            return self.value
        return f"{HELPER_BINARY_PREFIX}{self.value}"
