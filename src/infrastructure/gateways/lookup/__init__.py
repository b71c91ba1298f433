"""Lookup Client implementations"""
from src.infrastructure.gateways.lookup.lambda_lookup_client import LambdaLookupClient
from src.infrastructure.gateways.lookup.in_process_lookup_client import (
    InProcessLookupClient,
)

__all__ = ["LambdaLookupClient", "InProcessLookupClient"]
