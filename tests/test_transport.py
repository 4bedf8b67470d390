"""Tests for the UDP transport"""
import socket
from unittest.mock import Mock, patch
import pytest

from statsd_emitter.client import StatsdClient
from statsd_emitter.config import StatsdConfig
from statsd_emitter.exceptions import TransportConstructionError
from statsd_emitter.metrics.models import SendStatus
from statsd_emitter.transport import UDPTransport


class TestUDPTransport:
    """Test datagrams against a loopback receiver"""

    def setup_method(self):
        """Setup test fixtures"""
        self.receiver = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.receiver.bind(("127.0.0.1", 0))
        self.receiver.settimeout(2.0)
        self.port = self.receiver.getsockname()[1]

    def teardown_method(self):
        self.receiver.close()

    def test_send_datagram(self):
        with UDPTransport("127.0.0.1", self.port) as transport:
            assert transport.send(b"site.logins:1|c") is True

            assert self.receiver.recv(1024) == b"site.logins:1|c"

    def test_client_end_to_end(self):
        config = StatsdConfig(host="127.0.0.1", port=self.port)

        with StatsdClient(config) as client:
            result = client.update_stats(["a", "b"], 5)

            received = {self.receiver.recv(1024), self.receiver.recv(1024)}

        assert received == {b"a:5|c", b"b:5|c"}
        assert result.status is SendStatus.DELIVERED

    def test_one_datagram_per_metric(self):
        with StatsdClient(StatsdConfig(host="127.0.0.1", port=self.port)) as client:
            client.timing("q", 42)

            assert self.receiver.recv(1024) == b"q:42|ms"

    def test_close_is_idempotent(self):
        transport = UDPTransport("127.0.0.1", self.port)

        transport.close()
        transport.close()

        assert transport.closed is True

    def test_send_after_close_fails(self):
        transport = UDPTransport("127.0.0.1", self.port)
        transport.close()

        assert transport.send(b"a:1|c") is False

    def test_send_error_reported_not_raised(self):
        transport = UDPTransport("127.0.0.1", self.port)
        transport._sock.close()
        transport._sock = Mock(send=Mock(side_effect=OSError("Message too long")))

        assert transport.send(b"a:1|c") is False

    @patch('statsd_emitter.transport.socket.getaddrinfo')
    def test_resolution_failure(self, mock_getaddrinfo):
        mock_getaddrinfo.side_effect = socket.gaierror("Name or service not known")

        with pytest.raises(TransportConstructionError) as exc_info:
            UDPTransport("stats.invalid", 8125)

        assert isinstance(exc_info.value.__cause__, socket.gaierror)

    @patch('statsd_emitter.transport.socket.socket')
    def test_connect_failure_closes_socket(self, mock_socket):
        sock = mock_socket.return_value
        sock.connect.side_effect = OSError("Network is unreachable")

        with pytest.raises(TransportConstructionError):
            UDPTransport("127.0.0.1", self.port)

        sock.close.assert_called_once()

    def test_client_construction_failure(self):
        with patch('statsd_emitter.transport.socket.getaddrinfo', side_effect=socket.gaierror("nope")):
            with pytest.raises(TransportConstructionError):
                StatsdClient(StatsdConfig(host="stats.invalid"))
