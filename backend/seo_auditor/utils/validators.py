"""
URL validation utilities with SSRF prevention.
"""

import ipaddress
import re
from urllib.parse import urlparse

from seo_auditor.core.errors import ValidationError


# Allowed URL schemes
_ALLOWED_SCHEMES = {"http", "https"}

# Regex for basic URL format validation
_URL_PATTERN = re.compile(
    r"^https?://"
    r"(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,63}\.?|"
    r"localhost|"
    r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"
    r"(?::\d+)?"
    r"(?:/?|[/?]\S+)$",
    re.IGNORECASE,
)


def validate_url(url: str, allow_private: bool = False) -> str:
    """
    Validates a URL and prevents SSRF attacks.

    Args:
        url: The URL string to validate.
        allow_private: Skip the private/reserved address check (local testing only).

    Returns:
        The validated URL string (stripped).

    Raises:
        ValidationError: If the URL is invalid or points to a private/reserved IP.
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required and must be a non-empty string.")

    url = url.strip()

    # Check scheme
    parsed = urlparse(url)
    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise ValidationError(
            f"Invalid URL scheme '{parsed.scheme}'. Only HTTP and HTTPS are allowed."
        )

    # Check hostname presence
    hostname = parsed.hostname
    if not hostname:
        raise ValidationError("URL must contain a valid hostname.")

    # Block private / reserved IPs (SSRF prevention)
    if not allow_private:
        if hostname == "localhost":
            raise ValidationError("Access to localhost is not allowed.")
        try:
            ip = ipaddress.ip_address(hostname)
        except ValueError:
            ip = None  # a domain name, not an IP literal
        if ip is not None and (ip.is_private or ip.is_reserved or ip.is_loopback or ip.is_link_local):
            raise ValidationError(
                f"Access to private/reserved IP addresses is not allowed: {hostname}"
            )

    # Basic URL format check
    if not _URL_PATTERN.match(url):
        raise ValidationError(f"Invalid URL format: {url}")

    return url

