"""
Strategy Factory Module - Name lookup for registered strategies.

Strategies register under their canonical ``name`` plus any ``aliases``
they declare. Lookups ignore case and surrounding whitespace, so
"BFS", " breadth-first " and "bfs" all resolve to the same class.
"""

from typing import Any, Dict, List, Type

from .base import SolverStrategy


# Canonical name -> class, in registration order
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}
# Normalized name or alias -> canonical name
_LOOKUP: Dict[str, str] = {}

DEFAULT_STRATEGY = "bfs"


def _normalize(name: str) -> str:
    return name.strip().lower()


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry.

    Usage:
        @register_strategy
        class SpiralStrategy(FrontierSearch):
            name = "spiral"
            aliases = ("spiral-search",)

    Raises:
        ValueError: If the name or an alias is already taken by another class
    """
    keys = [_normalize(cls.name)] + [_normalize(a) for a in cls.aliases]
    for key in keys:
        owner = _LOOKUP.get(key)
        if owner is not None and _STRATEGIES[owner] is not cls:
            raise ValueError(f"Strategy name '{key}' already used by {owner}")

    _STRATEGIES[cls.name] = cls
    for key in keys:
        _LOOKUP[key] = cls.name
    return cls


def resolve_strategy_name(name: str) -> str:
    """
    Map a user-supplied name or alias to the canonical strategy name.

    Raises:
        ValueError: If nothing is registered under that name
    """
    canonical = _LOOKUP.get(_normalize(name))
    if canonical is None:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return canonical


def get_strategy_class(name: str) -> Type[SolverStrategy]:
    """Look up a strategy class by name or alias."""
    return _STRATEGIES[resolve_strategy_name(name)]


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name or alias.

    Args:
        name: Strategy name, e.g. "bfs", "A*" or "depth-first"
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If the name is unknown
    """
    return get_strategy_class(name)(**kwargs)


def get_strategy_names() -> List[str]:
    """Canonical names of all registered strategies."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, Any]]:
    """
    Describe every registered strategy.

    Returns:
        List of dicts with 'name', 'description', 'aliases' and 'weighted'
    """
    return [
        {
            "name": cls.name,
            "description": cls.description,
            "aliases": list(cls.aliases),
            "weighted": cls.weighted,
        }
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """'bfs' when registered, else the first registered name, else ''."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
