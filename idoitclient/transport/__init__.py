"""Transports for the JSON-RPC endpoint."""

from idoitclient.transport.http import HttpTransport

__all__ = ["HttpTransport"]
