"""
Wrap Interfaces — Abstract parameter injector.

The injector is the code-generation primitive that splices wrap parameters
into a module's registration call. Implementations must:
- Return syntactically valid code
- Place the parameters after the factory argument, in the order given
- Leave every other part of the code untouched
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class ParamInjector(ABC):
    """Abstract interface for parameter injection."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Injector name for logging."""
        ...

    @abstractmethod
    def add_params(self, code: str, params: Sequence[Any]) -> str:
        """
        Append params to the registration call in code.

        Args:
            code: Generated module code containing one registration call
            params: Ordered parameters, serialized as literals

        Returns:
            Rewritten code
        """
        ...
