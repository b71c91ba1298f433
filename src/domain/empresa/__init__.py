"""Empresa Domain Module"""
from .exceptions import RucLookupError
from .value_objects import (
    GET_OPERATION,
    NRO_RUC_ATTRIBUTE,
    NormalizedRequest,
    ResponseEnvelope,
    to_json,
)

__all__ = [
    "RucLookupError",
    "GET_OPERATION",
    "NRO_RUC_ATTRIBUTE",
    "NormalizedRequest",
    "ResponseEnvelope",
    "to_json",
]
