from __future__ import annotations

from urllib.parse import urlsplit


def is_local_url(url: str | None) -> bool:
    """True for same-origin relative paths such as ``/Animal?x=1``.

    Rejects absolute URLs, protocol-relative ``//host`` and the ``/\\host``
    variant browsers normalize to it.
    """
    if not url:
        return False
    if not url.startswith("/"):
        return False
    if url.startswith("//") or url.startswith("/\\"):
        return False
    if any(ch in url for ch in ("\r", "\n", "\t")):
        return False
    parts = urlsplit(url)
    return not parts.scheme and not parts.netloc


def safe_redirect_target(url: str | None, default: str) -> str:
    return url if is_local_url(url) else default
