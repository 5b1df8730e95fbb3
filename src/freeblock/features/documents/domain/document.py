"""
Graph document format

    {
        "blocks": [BlockRecord, ...],
        "settings": {"gridSize", "defaultSpacing", "minBlockWidth", "minBlockHeight"},
        "exportedAt": ISO-8601 string
    }

BlockRecord is produced by Block.to_dict() and read by Block.from_dict().
"""

BLOCKS_KEY = "blocks"
SETTINGS_KEY = "settings"
EXPORTED_AT_KEY = "exportedAt"


class DocumentFormatError(ValueError):
    """Raised when a document does not have the expected shape"""
    pass
