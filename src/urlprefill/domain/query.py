"""Turn a raw URL query string into prefill hints."""

from __future__ import annotations

from urllib.parse import parse_qs


def parse_location_query(query_string: str) -> dict[str, str | list[str]]:
    """Parse ``query_string`` the way a client-side router exposes it.

    A key seen once maps to its string value, a repeated key maps to the list of
    its values in order. Blank values are kept. A leading ``?`` is ignored.
    """

    parsed = parse_qs(query_string.removeprefix("?"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}
