"""Empresa Use Cases"""
from .request_normalizer import MalformedEventError, normalize
from .dispatch_operation import OperationDispatcher, UnsupportedOperationError
from .proxy_lookup import (
    MissingRequiredParameterError,
    ProxyLookupInput,
    ProxyLookupUseCase,
)

__all__ = [
    "MalformedEventError",
    "normalize",
    "OperationDispatcher",
    "UnsupportedOperationError",
    "MissingRequiredParameterError",
    "ProxyLookupInput",
    "ProxyLookupUseCase",
]
