"""
Block Service

Orchestrates block-related use cases on the graph store.
Handles auto-placement, grid snapping, size floors, cascade cleanup of links
on deletion, queries and grid arrangement, and emits domain events.

Unknown block ids are reported through return values (False / None / []),
never by raising.
"""
import math
from typing import List, Optional

from freeblock.features.blocks.domain.block import Block, Position, Size, generate_block_id
from freeblock.features.blocks.domain.block_repository import BlockRepository
from freeblock.application.events.event_bus import EventBus
from freeblock.application.events import (
    BlockCreated,
    BlockUpdated,
    BlockMoved,
    BlockResized,
    BlockDeleted,
    BlocksArranged,
)
from freeblock.application.settings.graph_settings import GraphSettingsManager
from freeblock.utils.message import Log

# Where the first auto-placed block and the arranged grid start
ORIGIN_X = 50
ORIGIN_Y = 50


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def snap_to_grid(value, grid_size):
    """Nearest multiple of grid_size"""
    return round_half_away_from_zero(value / grid_size) * grid_size


class BlockService:
    """
    Service for managing blocks in the graph store.

    Orchestrates block operations:
    - Creating blocks (auto-placed when no position is given)
    - Moving, resizing and editing blocks
    - Deleting blocks together with every link pointing at them
    - Querying and searching blocks
    - Arranging blocks in a grid

    Emits domain events for renderer synchronization.
    """

    def __init__(
        self,
        block_repo: BlockRepository,
        settings: GraphSettingsManager,
        event_bus: EventBus
    ):
        """
        Initialize block service.

        Args:
            block_repo: Repository holding the blocks
            settings: Live graph settings (grid size, spacing, minimum size)
            event_bus: Event bus for publishing domain events
        """
        self._block_repo = block_repo
        self._settings = settings
        self._event_bus = event_bus
        Log.debug("BlockService: Initialized")

    def create_block(
        self,
        content: str = "",
        block_type: str = "default",
        position: Optional[dict] = None,
        size: Optional[dict] = None
    ) -> Block:
        """
        Create a new block.

        Args:
            content: Block text
            block_type: Free-form type tag ("default", "note", "task", ...)
            position: Optional {"x", "y"}; auto-placed when omitted
            size: Optional {"width", "height"}; constructor default when omitted

        Returns:
            Created Block entity
        """
        block = Block(id=generate_block_id(), content=content, type=block_type)

        if position:
            pos = self._coerce_position(position)
        else:
            pos = self.get_auto_position()
        block.set_position(pos.x, pos.y)

        if size:
            dims = self._coerce_size(size)
            block.set_size(dims.width, dims.height)

        created_block = self._block_repo.create(block)

        self._event_bus.publish(BlockCreated(data={"block": created_block}))

        Log.info(f"BlockService: Created block '{created_block.id}' ({created_block.type}) at "
                 f"({created_block.position.x}, {created_block.position.y})")
        return created_block

    def get_auto_position(self) -> Position:
        """
        Position for a new block when the caller gives none.

        Empty store: (50, 50). Otherwise one default_spacing to the right of
        the block with the greatest x; among equal x the last one scanned
        supplies y.
        """
        blocks = self._block_repo.list_all()
        if not blocks:
            return Position(ORIGIN_X, ORIGIN_Y)

        rightmost = blocks[0]
        for block in blocks[1:]:
            if block.position.x >= rightmost.position.x:
                rightmost = block

        return Position(
            rightmost.position.x + self._settings.default_spacing,
            rightmost.position.y
        )

    def set_block_position(self, block_id: str, x, y, snap: bool = True) -> bool:
        """
        Move a block.

        Args:
            block_id: Block identifier
            x, y: New top-left corner
            snap: Round each coordinate to the nearest grid multiple

        Returns:
            False if the block does not exist
        """
        block = self._block_repo.get(block_id)
        if not block:
            return False

        if snap:
            grid_size = self._settings.grid_size
            x = snap_to_grid(x, grid_size)
            y = snap_to_grid(y, grid_size)

        block.set_position(x, y)
        self._event_bus.publish(BlockMoved(data={"block": block}))
        return True

    def set_block_size(self, block_id: str, width, height) -> bool:
        """
        Resize a block, raising width/height to the configured minimums.

        Returns:
            False if the block does not exist
        """
        block = self._block_repo.get(block_id)
        if not block:
            return False

        width = max(width, self._settings.min_block_width)
        height = max(height, self._settings.min_block_height)

        block.set_size(width, height)
        self._event_bus.publish(BlockResized(data={"block": block}))
        return True

    def set_block_content(self, block_id: str, content: str) -> bool:
        """
        Replace a block's content.

        Returns:
            False if the block does not exist
        """
        block = self._block_repo.get(block_id)
        if not block:
            return False

        block.set_content(content)
        self._event_bus.publish(BlockUpdated(data={"block": block}))
        return True

    def delete_block(self, block_id: str) -> bool:
        """
        Delete a block and every link that targets it.

        Returns:
            False if the block does not exist
        """
        block = self._block_repo.get(block_id)
        if not block:
            return False

        purged = 0
        for other in self._block_repo.list_all():
            if other.has_link(block_id):
                other.remove_link(block_id)
                purged += 1

        self._block_repo.delete(block_id)
        self._event_bus.publish(BlockDeleted(data={"id": block_id}))

        Log.info(f"BlockService: Deleted block '{block_id}' ({purged} incoming links removed)")
        return True

    def get_block(self, block_id: str) -> Optional[Block]:
        return self._block_repo.get(block_id)

    def get_all_blocks(self) -> List[Block]:
        return self._block_repo.list_all()

    def search_blocks(self, query: str) -> List[Block]:
        """Blocks whose content contains query, case-insensitively"""
        lower_query = query.lower()
        return [
            block for block in self._block_repo.list_all()
            if lower_query in block.content.lower()
        ]

    def get_incoming_links(self, block_id: str) -> List[Block]:
        """Blocks whose link table contains block_id"""
        return [block for block in self._block_repo.list_all() if block.has_link(block_id)]

    def get_outgoing_links(self, block_id: str) -> List[Block]:
        """Blocks that block_id links to; ids that no longer resolve are skipped"""
        block = self._block_repo.get(block_id)
        if not block:
            return []

        targets = (self._block_repo.get(target_id) for target_id in block.linked_ids())
        return [target for target in targets if target is not None]

    def arrange_blocks(self, columns: int = 3) -> int:
        """
        Lay all blocks out in a grid, in store order.

        Block i goes to column i % columns, row i // columns, at
        (50 + col * spacing, 50 + row * spacing), snapped to the grid.

        Returns:
            Number of blocks arranged

        Raises:
            ValueError: If columns < 1
        """
        if columns < 1:
            raise ValueError(f"columns must be at least 1, got {columns}")

        blocks = self._block_repo.list_all()
        spacing = self._settings.default_spacing

        for index, block in enumerate(blocks):
            col = index % columns
            row = index // columns
            self.set_block_position(
                block.id,
                ORIGIN_X + col * spacing,
                ORIGIN_Y + row * spacing
            )

        self._event_bus.publish(BlocksArranged(data={"count": len(blocks)}))
        Log.info(f"BlockService: Arranged {len(blocks)} blocks in {columns} columns")
        return len(blocks)

    @staticmethod
    def _coerce_position(position) -> Position:
        if isinstance(position, Position):
            return position
        return Position(x=position["x"], y=position["y"])

    @staticmethod
    def _coerce_size(size) -> Size:
        if isinstance(size, Size):
            return size
        return Size(width=size["width"], height=size["height"])
