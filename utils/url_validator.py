"""
SSRF Protection Module

Validates URLs before the server fetches them (dish images imported by URL).
Blocks localhost, private networks, and non-http(s) schemes.
"""

import ipaddress
import socket
from urllib.parse import urlparse

import requests


class SSRFError(Exception):
    """Raised when a URL fails SSRF validation."""
    pass


LOCALHOST_ALIASES = {'localhost', 'localhost.localdomain', 'ip6-localhost', 'ip6-loopback'}


def is_private_ip(ip_str):
    """Check if an IP address is private, loopback, or otherwise internal."""
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        return True  # Unparseable, treat as unsafe
    return (
        ip.is_private or
        ip.is_loopback or
        ip.is_reserved or
        ip.is_link_local or
        ip.is_multicast or
        ip.is_unspecified
    )


def is_safe_url(url):
    """
    Validate that a URL is safe to fetch.

    Returns (is_safe, error_message) tuple.
    """
    if not url:
        return False, "Empty URL"

    try:
        parsed = urlparse(url)
    except ValueError:
        return False, "Invalid URL format"

    if parsed.scheme not in ('http', 'https'):
        return False, f"Invalid scheme: {parsed.scheme or 'none'}. Only http and https are allowed."

    hostname = parsed.hostname
    if not hostname:
        return False, "No hostname in URL"

    if hostname.lower() in LOCALHOST_ALIASES:
        return False, "Cannot access localhost"

    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        pass
    else:
        if is_private_ip(hostname):
            return False, f"Cannot access private/internal IP: {hostname}"
        return True, None

    try:
        resolved = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror:
        return False, f"Cannot resolve hostname: {hostname}"

    for _family, _type, _proto, _canonname, sockaddr in resolved:
        if is_private_ip(sockaddr[0]):
            return False, f"Hostname resolves to private/internal IP: {sockaddr[0]}"

    return True, None


def safe_fetch(url, timeout=10, max_size=10 * 1024 * 1024):
    """
    Fetch a URL with SSRF protection and a size limit.

    Redirects are not followed, since a redirect could point at an internal host.

    Returns:
        The response body as bytes

    Raises:
        SSRFError: If the URL fails validation or the body is too large
        requests.RequestException: For network errors
    """
    is_safe, error = is_safe_url(url)
    if not is_safe:
        raise SSRFError(error)

    response = requests.get(
        url,
        headers={'User-Agent': 'MenuStudio/1.0 (+image import)'},
        timeout=timeout,
        stream=True,
        allow_redirects=False,
    )
    try:
        response.raise_for_status()

        content_length = response.headers.get('content-length')
        if content_length and content_length.isdigit() and int(content_length) > max_size:
            raise SSRFError(f"Response too large: {content_length} bytes (max {max_size})")

        content = bytearray()
        for chunk in response.iter_content(chunk_size=8192):
            content.extend(chunk)
            if len(content) > max_size:
                raise SSRFError(f"Response exceeded maximum size of {max_size} bytes")
        return bytes(content)
    finally:
        response.close()
