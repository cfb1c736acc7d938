"""Notation auto-discovery and registration.

Scans contrast_checker/notations/ for modules that define a `notation`
object of type Notation. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing, falling back to the known
module list).
"""

import importlib
import pkgutil

from contrast_checker.core.types import Notation

_registry: dict[str, Notation] = {}

# Known notation module names, fallback for frozen binaries
_NOTATION_MODULES = [
    'hex',
    'hsl',
    'rgb',
]


def discover() -> dict[str, Notation]:
    """Import all notation modules and return the registry."""
    if _registry:
        return _registry

    import contrast_checker.notations as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _NOTATION_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'contrast_checker.notations.{modname}')
        notation = getattr(module, 'notation', None)
        if isinstance(notation, Notation):
            _registry[notation.name] = notation

    return _registry


def get(name: str) -> Notation:
    """Get a notation by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown notation: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_notations() -> dict[str, Notation]:
    """Return all registered notations."""
    return discover()
