"""
Settings repository port (interface).

This defines the contract for reading and writing persisted
key-value options. Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class SettingsRepository(ABC):
    """
    Abstract repository for named option values.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def load(self, name: str) -> Dict[str, Any]:
        """
        Load an option.

        Args:
            name: Option name

        Returns:
            Option value as a mapping (empty if the option is not stored)
        """
        pass

    @abstractmethod
    async def store(self, name: str, value: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or replace an option.

        Args:
            name: Option name
            value: Option value

        Returns:
            Stored option value
        """
        pass
