"""Infrastructure Config"""
from .settings import Settings, get_settings
from .ssm_config_resolver import SsmConfigResolver

__all__ = ["Settings", "get_settings", "SsmConfigResolver"]
