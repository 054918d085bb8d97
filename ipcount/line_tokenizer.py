"""Extract the client IP token from an access-log line."""

from typing import Optional


def extract_ip(line: str) -> Optional[str]:
    """Return the first whitespace-delimited field, or None for a blank line.

    The token is not validated as an address: "10.0.0.1", "::1" and "-" are
    all returned as-is.
    """
    fields = line.split(None, 1)
    if not fields:
        return None
    return fields[0]
