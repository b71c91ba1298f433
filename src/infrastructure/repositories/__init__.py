"""Infrastructure Repositories"""
from .dynamodb_empresa_store import DynamoDBEmpresaStore

__all__ = ["DynamoDBEmpresaStore"]
