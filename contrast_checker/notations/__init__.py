"""Auto-discovery of notation modules.

Every .py file in this package that defines a `notation` object is
auto-registered by contrast_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the notation files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with notation modules
import contrast_checker.notations.hex as _hex  # noqa: F401
import contrast_checker.notations.hsl as _hsl  # noqa: F401
import contrast_checker.notations.rgb as _rgb  # noqa: F401
