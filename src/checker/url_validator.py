"""URL validation and normalization utilities."""
from typing import Annotated, Optional

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

DEFAULT_SCHEME = "https://"

# Like HttpUrl, without its 2083 character cap
_web_url = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]
)


def normalize_url(url: str) -> str:
    """
    Normalize a URL by adding https:// if no http(s) scheme is present.

    Args:
        url: The raw URL text entered by the user

    Returns:
        Normalized URL string
    """
    url = url.strip()

    if not url.lower().startswith(('http://', 'https://')):
        url = DEFAULT_SCHEME + url

    return url


def validate_url(url: str) -> Optional[str]:
    """
    Normalize a URL and check that it is well-formed.

    Args:
        url: The raw URL text entered by the user

    Returns:
        The normalized URL, or None if it is not a valid http(s) URL
    """
    url = normalize_url(url)

    try:
        _web_url.validate_python(url)
    except ValidationError:
        return None

    return url
