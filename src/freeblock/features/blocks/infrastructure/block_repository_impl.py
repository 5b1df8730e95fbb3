"""
In-memory implementation of BlockRepository

Blocks live in an insertion-ordered dict keyed by block id. The repository
owns the Block objects; everything else refers to them by id.
"""
from typing import Dict, Iterable, List, Optional

from freeblock.features.blocks.domain.block import Block
from freeblock.features.blocks.domain.block_repository import BlockRepository
from freeblock.utils.message import Log


class InMemoryBlockRepository(BlockRepository):
    """Dict-backed implementation of BlockRepository"""
    
    def __init__(self):
        self._blocks: Dict[str, Block] = {}
    
    def create(self, block: Block) -> Block:
        """
        Store a new block.
        
        Raises:
            ValueError: If a block with the same ID already exists
        """
        if block.id in self._blocks:
            raise ValueError(f"Block with id '{block.id}' already exists")
        self._blocks[block.id] = block
        Log.debug(f"Created block: {block.id}")
        return block
    
    def get(self, block_id: str) -> Optional[Block]:
        return self._blocks.get(block_id)
    
    def delete(self, block_id: str) -> bool:
        if self._blocks.pop(block_id, None) is None:
            return False
        Log.debug(f"Deleted block: {block_id}")
        return True
    
    def list_all(self) -> List[Block]:
        return list(self._blocks.values())
    
    def replace_all(self, blocks: Iterable[Block]) -> None:
        self._blocks = {block.id: block for block in blocks}
