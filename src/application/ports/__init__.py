"""Application Ports (Interfaces)"""
from .config_resolver import ConfigurationUnavailableError, IConfigResolver
from .record_store import DataAccessError, IRecordStore, NotInitializedError
from .lookup_client import ILookupClient, LookupInvocationError

__all__ = [
    "IConfigResolver",
    "ConfigurationUnavailableError",
    "IRecordStore",
    "NotInitializedError",
    "DataAccessError",
    "ILookupClient",
    "LookupInvocationError",
]
