"""Building blocks for a DTLS 1.2 stack: cipher suites, fragment reassembly, handshake cache and an in-memory datagram pipe."""

__version__ = "0.1.0"