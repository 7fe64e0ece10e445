"""
Resolver context initialization
"""

import logging
import socket

from .models import Config, ResolverContext


logger = logging.getLogger(__name__)


class ResolverError(Exception):
    """Configured resolver address could not be resolved"""


def build_context(config: Config) -> ResolverContext:
    """
    Resolve the configured resolver host/port into a concrete endpoint.

    The socket type follows the configured protocol. The first endpoint
    returned is used, and it is name-resolved once to make sure it is
    usable before any lookup starts.

    Args:
        config: Run configuration

    Returns:
        ResolverContext for the first endpoint

    Raises:
        ResolverError: if the resolver address or its name cannot be resolved
    """
    if not config.resolver:
        raise ResolverError("no resolver address given")

    try:
        infos = socket.getaddrinfo(
            config.resolver, str(config.port),
            socket.AF_UNSPEC, config.socket_type
        )
    except (socket.gaierror, UnicodeError) as e:
        raise ResolverError(_reason(e)) from e

    if not infos:
        raise ResolverError(f"no address found for '{config.resolver}'")

    family, socket_type, _, _, sockaddr = infos[0]

    try:
        server_name, _ = socket.getnameinfo(sockaddr, 0)
    except (socket.gaierror, OSError) as e:
        raise ResolverError(_reason(e)) from e

    context = ResolverContext(
        family=family,
        socket_type=socket_type,
        address=sockaddr[0],
        port=sockaddr[1],
        sockaddr=sockaddr,
        server_name=server_name
    )
    logger.debug("Resolver %s:%d (%s) over %s", context.address, context.port,
                 server_name, config.protocol)
    return context


def _reason(error: Exception) -> str:
    # gaierror args are (errno, message)
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
