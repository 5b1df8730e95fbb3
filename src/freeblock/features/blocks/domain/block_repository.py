"""
Block repository interface

Defines the contract for block storage.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from freeblock.features.blocks.domain.block import Block


class BlockRepository(ABC):
    """Repository interface for Block entities"""
    
    @abstractmethod
    def create(self, block: Block) -> Block:
        """
        Store a new block.
        
        Raises:
            ValueError: If a block with the same ID already exists
        """
        pass
    
    @abstractmethod
    def get(self, block_id: str) -> Optional[Block]:
        """
        Get block by ID.
        
        Returns:
            Block entity or None if not found
        """
        pass
    
    @abstractmethod
    def delete(self, block_id: str) -> bool:
        """
        Remove a block.
        
        Returns:
            True if a block was removed, False if not found
        """
        pass
    
    @abstractmethod
    def list_all(self) -> List[Block]:
        """All blocks in insertion order"""
        pass
    
    @abstractmethod
    def replace_all(self, blocks: Iterable[Block]) -> None:
        """Drop every stored block and store the given ones, in order"""
        pass
