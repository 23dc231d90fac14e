"""Plain-socket banner grabbing for HTTP and SMTP services."""

import socket
from typing import Optional

from .. import constants
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _exchange(host: str, port: int, payload: bytes = b"", timeout: float = constants.DEFAULT_TIMEOUT) -> str:
    """Connect, optionally send ``payload`` and return the first read, decoded leniently."""
    with socket.create_connection((host, port), timeout=timeout) as sock:
        if payload:
            sock.sendall(payload)
        data = sock.recv(constants.BANNER_RECV_BYTES)
    return data.decode('utf-8', errors='replace')


def http_banner(address: str, host: str, user_agent: str = constants.DEFAULT_USER_AGENT,
                port: int = constants.HTTP_PORT, timeout: float = constants.DEFAULT_TIMEOUT) -> Optional[str]:
    """
    Send a HEAD request and return the value of the ``Server`` response header.

    Args:
        address: IP address to connect to
        host: Value of the Host header (the candidate's ASCII name)
        user_agent: Value of the User-Agent header
        port: TCP port
        timeout: Connect and read timeout in seconds

    Returns:
        The header value, or None on I/O failure or when the header is absent
    """
    request = (
        f"HEAD / HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        f"User-Agent: {user_agent}\r\n\r\n"
    ).encode('ascii', errors='replace')
    try:
        response = _exchange(address, port, request, timeout)
    except OSError as e:
        logger.debug(f"HTTP banner from {address}:{port} failed: {e}")
        return None

    for line in response.splitlines():
        if line.lower().startswith("server:"):
            return line[len("server:"):].strip()
    return None


def smtp_banner(host: str, port: int = constants.SMTP_PORT,
                timeout: float = constants.DEFAULT_TIMEOUT) -> Optional[str]:
    """Return the greeting an SMTP server sends on connect, trimmed, or None."""
    try:
        greeting = _exchange(host, port, timeout=timeout)
    except OSError as e:
        logger.debug(f"SMTP banner from {host}:{port} failed: {e}")
        return None
    return greeting.strip() or None
