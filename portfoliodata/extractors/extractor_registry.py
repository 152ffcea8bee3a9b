"""
Extractor registry for managing named record extractors.

Each dataset is run by the extractor registered under its name; the
built-in extractors are registered as "career" and "thanks". Every
registered class declares the record kind it produces, which the CLI
reports through list_extractors().
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from ..shared import RecordKind
from .base import RecordExtractor


# Global extractor registry
_EXTRACTOR_REGISTRY: Dict[str, Type[RecordExtractor]] = {}


def register_extractor(name: str, extractor_class: Type[RecordExtractor]) -> None:
    """
    Register an extractor class in the global registry.

    Args:
        name: The dataset name to register the extractor under (e.g., "career")
        extractor_class: A RecordExtractor subclass declaring its record kind

    Raises:
        TypeError: If extractor_class is not a RecordExtractor subclass or
            does not declare a RecordKind
    """
    if not (isinstance(extractor_class, type) and issubclass(extractor_class, RecordExtractor)):
        raise TypeError(f"{extractor_class!r} is not a RecordExtractor subclass")
    if not isinstance(getattr(extractor_class, "kind", None), RecordKind):
        raise TypeError(f"{extractor_class.__name__} does not declare a record kind")
    _EXTRACTOR_REGISTRY[name] = extractor_class


def get_extractor(name: str, **kwargs) -> Optional[RecordExtractor]:
    """
    Get an extractor instance by name.

    Returns:
        Extractor instance, or None if not found
    """
    extractor_class = _EXTRACTOR_REGISTRY.get(name)
    if extractor_class:
        return extractor_class(**kwargs)
    return None


def list_extractors() -> List[Dict[str, str]]:
    """
    List all registered extractors with their descriptions.

    Returns:
        List of dicts with 'name', 'kind' and 'description' keys
    """
    extractors = []
    for name, extractor_class in _EXTRACTOR_REGISTRY.items():
        description = extractor_class.__doc__ or "No description available"
        description = description.strip().split('\n')[0]
        extractors.append({
            'name': name,
            'kind': extractor_class.kind.value,
            'description': description,
        })
    return sorted(extractors, key=lambda x: x['name'])


def unregister_extractor(name: str) -> None:
    """Unregister an extractor from the global registry."""
    _EXTRACTOR_REGISTRY.pop(name, None)


__all__ = [
    "register_extractor",
    "get_extractor",
    "list_extractors",
    "unregister_extractor",
]
