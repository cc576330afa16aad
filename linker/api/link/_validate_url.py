from urllib.parse import urlparse


def _validate_url(url: str) -> str:
    """Return url unchanged if it parses as an absolute URL.

    Raises:
        ValueError: If the scheme or the rest of the URL is missing
    """
    parsed = urlparse(url)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValueError(f"Invalid URL: {url}")
    return url
