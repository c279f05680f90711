"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by colwidth.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports; keep this list in sync with command modules
import colwidth.commands.all as _all  # noqa: F401
import colwidth.commands.apply as _apply  # noqa: F401
import colwidth.commands.explicit as _explicit  # noqa: F401
import colwidth.commands.extract as _extract  # noqa: F401
import colwidth.commands.preview as _preview  # noqa: F401
import colwidth.commands.redistribute as _redistribute  # noqa: F401
import colwidth.commands.total as _total  # noqa: F401
import colwidth.commands.widths as _widths  # noqa: F401
