"""UDP transport to the statsd daemon"""
import socket
from typing import Optional, Protocol

from .exceptions import TransportConstructionError
from .logging_config import get_logger

logger = get_logger(__name__)


class Transport(Protocol):
    """Anything that can fire one datagram at the daemon"""

    def send(self, payload: bytes) -> bool:
        """Send one payload, True if it left the host"""
        ...


class UDPTransport:
    """Connected UDP socket bound to one statsd daemon"""

    def __init__(self, host: str = "localhost", port: int = 8125):
        self.host = host
        self.port = int(port)
        self._sock: Optional[socket.socket] = None

        try:
            family, socktype, proto, _, sockaddr = socket.getaddrinfo(
                self.host, self.port, type=socket.SOCK_DGRAM
            )[0]
            sock = socket.socket(family, socktype, proto)
        except OSError as e:
            raise TransportConstructionError(
                f"Cannot open UDP socket to statsd at {self.host}:{self.port}: {e}"
            ) from e

        try:
            # connect() on a datagram socket only pins the peer, nothing is sent
            sock.connect(sockaddr)
        except OSError as e:
            sock.close()
            raise TransportConstructionError(
                f"Cannot connect UDP socket to statsd at {self.host}:{self.port}: {e}"
            ) from e

        self._sock = sock
        logger.debug("UDP transport opened", host=self.host, port=self.port, peer=str(sockaddr))

    @property
    def closed(self) -> bool:
        return self._sock is None

    def send(self, payload: bytes) -> bool:
        if self._sock is None:
            logger.warning("Send on closed UDP transport", host=self.host, port=self.port)
            return False
        try:
            self._sock.send(payload)
        except OSError as e:
            logger.warning(
                "UDP packet send failed",
                host=self.host,
                port=self.port,
                error=str(e),
                error_type=type(e).__name__
            )
            return False
        return True

    def close(self) -> None:
        """Close the socket, safe to call twice"""
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.debug("UDP transport closed", host=self.host, port=self.port)

    def __enter__(self) -> "UDPTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
