"""Aspect strategy registry.

Simple dict-based registry. Both shipped aspects are registered at
import time via ``aspects/__init__.py``. Adding an aspect means writing
one AspectStrategy subclass and registering it here; the synthesizer
does not change.
"""

import logging
from typing import Dict, List, Optional, Type

from ..errors import UsageError
from .base import Aspect, AspectStrategy, RenderOptions

logger = logging.getLogger(__name__)


class AspectRegistry:
    """Registry for aspect strategies.

    Class-level store keyed by the Aspect tag. Strategies are stored as
    classes and instantiated per synthesis run with that run's options.
    """

    _strategies: Dict[Aspect, Type[AspectStrategy]] = {}

    @classmethod
    def register(cls, strategy_cls: Type[AspectStrategy]) -> Type[AspectStrategy]:
        """Register a strategy class under the aspect it reports."""
        aspect = strategy_cls().aspect
        cls._strategies[aspect] = strategy_cls
        logger.debug(f"Registered aspect strategy: {aspect.value} ({strategy_cls.__name__})")
        return strategy_cls

    @classmethod
    def get(cls, aspect: Aspect) -> Optional[Type[AspectStrategy]]:
        """Get a strategy class by tag. Returns ``None`` if not registered."""
        return cls._strategies.get(aspect)

    @classmethod
    def create(cls, aspect: Aspect, options: Optional[RenderOptions] = None) -> AspectStrategy:
        """Instantiate the strategy for ``aspect``.

        Raises:
            UsageError: If no strategy is registered for the aspect
        """
        strategy_cls = cls.get(aspect)
        if strategy_cls is None:
            raise UsageError(f"No strategy registered for aspect: {aspect.value}")
        return strategy_cls(options)

    @classmethod
    def list_aspects(cls) -> List[Aspect]:
        """Registered aspects, in enum declaration order."""
        return [aspect for aspect in Aspect if aspect in cls._strategies]
