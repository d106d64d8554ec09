"""Parser for git configuration option values.

Handles the value grammar used by ``credential.helper``: an optional ``!``
shell command marker followed by a quoted string or the rest of the line.
"""

import re

from ....domain.exceptions import ParseError
from ....domain.value_objects import GitConfigOption

_OPTION = re.compile(
    r"""
    \s*(?P<shell>!)?
    \s*(?:
        (?P<quote>["'])(?P<quoted>(?:\\?.)*?)(?P=quote)
        |
        (?P<bare>.*)
    )
    """,
    re.VERBOSE,
)


def parse_config_option(raw: str) -> GitConfigOption:
    """
    Parse a git configuration value.

    Matching is anchored at the start of the input only; text after a closing
    quote is ignored.

    Raises:
        ParseError: If the value does not match the option grammar.
    """
    match = _OPTION.match(raw)
    if match is None:
        msg = f"Failed to parse git config option: {raw!r}"
        raise ParseError(msg)

    value = match["quoted"] if match["quote"] else match["bare"]
    return GitConfigOption(value=value, is_shell_command=match["shell"] is not None)
