"""
Link Service

Translates link intents into edge mutations on block link tables and
reconstructs the intent between two blocks on query.

Every link operation first clears any existing edge between the pair in
both directions, so applying an intent replaces rather than merges.
"""
from typing import Optional, Union

from freeblock.features.blocks.domain import Block, BlockRepository, LinkType
from freeblock.features.links.domain.link_intent import LinkIntent, LinkInfo
from freeblock.application.events.event_bus import EventBus
from freeblock.application.events import BlocksLinked, BlocksUnlinked
from freeblock.utils.message import Log


class LinkService:
    """
    Service for managing links between blocks.

    Orchestrates link operations:
    - Applying a single / reverse / double intent between two blocks
    - Removing links in both directions
    - Reporting the link between two blocks

    Emits domain events for renderer synchronization.
    """

    def __init__(self, block_repo: BlockRepository, event_bus: EventBus):
        """
        Initialize link service.

        Args:
            block_repo: Repository holding the blocks
            event_bus: Event bus for publishing domain events
        """
        self._block_repo = block_repo
        self._event_bus = event_bus
        Log.debug("LinkService: Initialized")

    def link_blocks(
        self,
        from_id: str,
        to_id: str,
        intent: Union[LinkIntent, str] = LinkIntent.SINGLE
    ) -> bool:
        """
        Link two blocks.

        Args:
            from_id: Source block identifier
            to_id: Target block identifier
            intent: LinkIntent or its string value ("single", "reverse", "double")

        Returns:
            False if either block does not exist

        Raises:
            ValueError: If intent is not a known link intent
        """
        intent = LinkIntent.from_string(intent)

        from_block = self._block_repo.get(from_id)
        to_block = self._block_repo.get(to_id)
        if not from_block or not to_block:
            return False

        self._clear_pair(from_block, to_block)

        if intent is LinkIntent.SINGLE:
            from_block.add_link(to_id, LinkType.SINGLE)
        elif intent is LinkIntent.REVERSE:
            to_block.add_link(from_id, LinkType.SINGLE)
        elif intent is LinkIntent.DOUBLE:
            from_block.add_link(to_id, LinkType.DOUBLE)
            to_block.add_link(from_id, LinkType.DOUBLE)

        self._event_bus.publish(BlocksLinked(data={
            "from": from_block,
            "to": to_block,
            "link_type": intent
        }))

        Log.info(f"LinkService: Linked {from_id} -> {to_id} ({intent.value})")
        return True

    def update_link_type(
        self,
        from_id: str,
        to_id: str,
        new_intent: Union[LinkIntent, str]
    ) -> bool:
        """Replace the link between two blocks with new_intent (same as link_blocks)"""
        return self.link_blocks(from_id, to_id, new_intent)

    def unlink_blocks(self, from_id: str, to_id: str) -> bool:
        """
        Remove every edge between two blocks, whatever its type or direction.

        Returns:
            False only if neither block exists
        """
        from_block = self._block_repo.get(from_id)
        to_block = self._block_repo.get(to_id)
        if not from_block and not to_block:
            return False

        if from_block:
            from_block.remove_link(to_id)
        if to_block:
            to_block.remove_link(from_id)

        self._event_bus.publish(BlocksUnlinked(data={"from_id": from_id, "to_id": to_id}))

        Log.info(f"LinkService: Unlinked {from_id} and {to_id}")
        return True

    def get_link_info(self, from_id: str, to_id: str) -> Optional[LinkInfo]:
        """
        Reconstruct the link between two blocks.

        - edges both ways: DOUBLE, from/to as given
        - only from -> to: SINGLE, from/to as given
        - only to -> from: SINGLE with from/to swapped, i.e. the edge that exists
        - no edge, or either block unknown: None
        """
        from_block = self._block_repo.get(from_id)
        to_block = self._block_repo.get(to_id)
        if not from_block or not to_block:
            return None

        has_forward = from_block.has_link(to_id)
        has_backward = to_block.has_link(from_id)

        if has_forward and has_backward:
            return LinkInfo(type=LinkIntent.DOUBLE, from_id=from_id, to_id=to_id)
        elif has_forward:
            return LinkInfo(type=LinkIntent.SINGLE, from_id=from_id, to_id=to_id)
        elif has_backward:
            return LinkInfo(type=LinkIntent.SINGLE, from_id=to_id, to_id=from_id)

        return None

    @staticmethod
    def _clear_pair(first: Block, second: Block) -> None:
        first.remove_link(second.id)
        second.remove_link(first.id)
