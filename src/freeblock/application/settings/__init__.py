"""
Settings module.

Provides:
- BaseSettings / validated_field / ValidationResult: dataclass settings framework
- GraphSettings: layout settings of a block graph
"""
from .base_settings import (
    BaseSettings,
    FieldValidator,
    ValidationResult,
    validated_field,
)
from .graph_settings import GraphSettings, GraphSettingsManager

__all__ = [
    'BaseSettings',
    'FieldValidator',
    'ValidationResult',
    'validated_field',
    'GraphSettings',
    'GraphSettingsManager',
]
