"""
Graph Settings

Store-wide layout settings: grid snapping, auto-placement spacing and the
minimum block dimensions enforced on resize.

Documents carry these under camelCase keys (gridSize, defaultSpacing,
minBlockWidth, minBlockHeight); the dataclass uses snake_case fields.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from freeblock.application.settings.base_settings import BaseSettings, validated_field


def _require_number(value: Any, field_name: str) -> Optional[str]:
    # bool is an int subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{field_name}: Expected a number, got {type(value).__name__}"
    return None


# snake_case field -> camelCase document key
DOCUMENT_KEYS = {
    "grid_size": "gridSize",
    "default_spacing": "defaultSpacing",
    "min_block_width": "minBlockWidth",
    "min_block_height": "minBlockHeight",
}
FIELD_NAMES = {document_key: name for name, document_key in DOCUMENT_KEYS.items()}


@dataclass
class GraphSettings(BaseSettings):
    """
    Layout settings for a block graph.

    Attributes:
        grid_size: Snap increment for block positions
        default_spacing: Distance between auto-placed and arranged blocks
        min_block_width: Smallest width a resize may produce
        min_block_height: Smallest height a resize may produce
    """
    grid_size: int = validated_field(20, min_value=1, allow_none=False, custom=_require_number)
    default_spacing: int = validated_field(300, min_value=0, allow_none=False, custom=_require_number)
    min_block_width: int = validated_field(150, min_value=1, allow_none=False, custom=_require_number)
    min_block_height: int = validated_field(100, min_value=1, allow_none=False, custom=_require_number)

    def to_document(self) -> Dict[str, Any]:
        """Settings as they appear in an exported document."""
        return {DOCUMENT_KEYS[name]: value for name, value in self.to_dict().items()}

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> 'GraphSettings':
        """Build settings from document keys, defaulting anything missing."""
        return cls().merge(data)

    def merge(self, data: Dict[str, Any]) -> 'GraphSettings':
        """
        Shallow-merge document keys over these settings.

        Missing keys keep their current value; unknown keys are ignored.
        Snake_case field names are accepted as well.

        Returns:
            A new GraphSettings; self is not modified.

        Raises:
            TypeError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise TypeError(f"Settings must be an object, got {type(data).__name__}")
        updates = {}
        for key, value in data.items():
            name = FIELD_NAMES.get(key, key)
            if name in DOCUMENT_KEYS:
                updates[name] = value
        return replace(self, **updates)

    def unknown_keys(self, data: Dict[str, Any]) -> list:
        """Keys in data that merge() would ignore."""
        return [key for key in data if key not in FIELD_NAMES and key not in DOCUMENT_KEYS]


class GraphSettingsManager:
    """
    Holds the live GraphSettings of one store.

    Services read settings through the manager so an import that replaces
    the settings object is seen everywhere at once.

    Usage:
        manager = GraphSettingsManager()
        manager.grid_size                      # 20
        manager.apply({"gridSize": 10})        # validated shallow merge
    """

    SETTINGS_CLASS = GraphSettings

    def __init__(self, settings: Optional[GraphSettings] = None):
        self._settings = settings or self.SETTINGS_CLASS()
        result = self._settings.validate()
        if not result.valid:
            raise ValueError(f"Invalid graph settings: {'; '.join(result.errors)}")

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def grid_size(self):
        return self._settings.grid_size

    @property
    def default_spacing(self):
        return self._settings.default_spacing

    @property
    def min_block_width(self):
        return self._settings.min_block_width

    @property
    def min_block_height(self):
        return self._settings.min_block_height

    def preview(self, data: Dict[str, Any]) -> GraphSettings:
        """
        Merge data over the current settings and validate, without applying.

        Raises:
            TypeError: If data is not a mapping
            ValueError: If the merged settings fail validation
        """
        merged = self._settings.merge(data)
        result = merged.validate()
        if not result.valid:
            raise ValueError(f"Invalid graph settings: {'; '.join(result.errors)}")
        return merged

    def apply(self, data: Dict[str, Any]) -> GraphSettings:
        """Validated shallow merge of document keys; returns the new settings."""
        self._settings = self.preview(data)
        return self._settings

    def replace(self, settings: GraphSettings) -> None:
        self._settings = settings

    def reset(self) -> None:
        """Restore defaults"""
        self._settings = self.SETTINGS_CLASS()

    def to_document(self) -> Dict[str, Any]:
        return self._settings.to_document()
