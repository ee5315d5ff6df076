"""Field checks shared by request schemas."""
from typing import Optional
from urllib.parse import urlparse


def check_http_url(value: Optional[str]) -> Optional[str]:
    """Accept None or an absolute http(s) URL."""
    if value is None:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return value
