"""JSON-RPC protocol layer for the i-doit API."""

from idoitclient.jsonrpc.auth import Credentials, PasswordCredentials, SessionCredentials
from idoitclient.jsonrpc.batch import Batch
from idoitclient.jsonrpc.cleaner import JsonRpcResponseCleaner
from idoitclient.jsonrpc.client import JsonRpcClient, Transport
from idoitclient.jsonrpc.envelope import UNBATCHED_ID, JsonRpcRequest, JsonRpcResponse
from idoitclient.jsonrpc.requests import (
    CategoryRead,
    CategorySave,
    CategorySaveResponse,
    IdoitRequest,
    Login,
    LoginResponse,
    Logout,
    ObjectDescriptor,
    ObjectsFilter,
    ObjectsRead,
    ObjectsReadResponse,
    Ordering,
    SimpleSuccessResponse,
    SortDirection,
)

__all__ = [
    "Credentials",
    "PasswordCredentials",
    "SessionCredentials",
    "Batch",
    "JsonRpcResponseCleaner",
    "JsonRpcClient",
    "Transport",
    "UNBATCHED_ID",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "CategoryRead",
    "CategorySave",
    "CategorySaveResponse",
    "IdoitRequest",
    "Login",
    "LoginResponse",
    "Logout",
    "ObjectDescriptor",
    "ObjectsFilter",
    "ObjectsRead",
    "ObjectsReadResponse",
    "Ordering",
    "SimpleSuccessResponse",
    "SortDirection",
]
