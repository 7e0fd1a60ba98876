"""
idoitclient - client for the i-doit CMDB JSON-RPC API
"""

__version__ = "0.1.0"
__logo__ = "🗄"

from idoitclient.jsonrpc import Batch, JsonRpcClient
from idoitclient.reader import ObjectsReader
from idoitclient.session import IdoitSession, open_session
from idoitclient.utils.exceptions import IdoitClientError, InvalidArgument, ProtocolError, TransportError

__all__ = [
    "__version__",
    "Batch",
    "JsonRpcClient",
    "ObjectsReader",
    "IdoitSession",
    "open_session",
    "IdoitClientError",
    "InvalidArgument",
    "ProtocolError",
    "TransportError",
]
