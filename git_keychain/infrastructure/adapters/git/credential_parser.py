"""Parser for git credential helper output.

See git-credential(1) for the key/value format.
"""

import re

from ....domain.exceptions import ParseError

# No whitespace skipping: keys and values are taken exactly as written.
_KEY_VALUE = re.compile(r"([a-zA-Z]+)=([^\r\n]*)(?:\r\n|\n|\r|\Z)")


def parse_credential_output(raw: str) -> dict[str, str]:
    """
    Parse ``key=value`` lines into a mapping.

    The whole input must be consumed. Repeated keys keep their last value.

    Raises:
        ParseError: If any line is not a well-formed key/value pair.
    """
    fields: dict[str, str] = {}
    pos = 0

    while pos < len(raw):
        match = _KEY_VALUE.match(raw, pos)
        if match is None:
            line = raw[pos:].splitlines()[0]
            msg = f"Malformed key/value pair at offset {pos}: {line!r}"
            raise ParseError(msg)

        key, value = match.groups()
        fields[key] = value
        pos = match.end()

    return fields
