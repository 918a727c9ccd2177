"""Shareable link encoding for favorite selections."""

from urllib.parse import parse_qs, quote, urlencode, urlsplit

from pawmatch.domain.selection import SelectionSnapshot, normalize_identifiers

IDS_PARAM = "ids"
DELIMITER = ","
FAVORITES_PATH = "/favorites"


def encode(snapshot: SelectionSnapshot) -> str | None:
    """Join identifiers into a parameter value; None means omit the parameter."""
    if not snapshot:
        return None
    return DELIMITER.join(snapshot)


def decode(value: object) -> SelectionSnapshot:
    """Split a parameter value back into a snapshot. Never raises."""
    if not isinstance(value, str):
        return ()
    return normalize_identifiers(value.split(DELIMITER))


def build_share_url(
    base_url: str, snapshot: SelectionSnapshot, path: str = FAVORITES_PATH
) -> str:
    """Return the full shareable URL for ``snapshot``."""
    url = f"{base_url.rstrip('/')}{path}"
    value = encode(snapshot)
    if value is None:
        return url
    query = urlencode({IDS_PARAM: value}, safe=DELIMITER, quote_via=quote)
    return f"{url}?{query}"


def selection_from_url(url: str) -> SelectionSnapshot:
    """Decode the selection carried by a shareable URL."""
    values = parse_qs(urlsplit(url).query).get(IDS_PARAM)
    if not values:
        return ()
    return decode(values[0])
