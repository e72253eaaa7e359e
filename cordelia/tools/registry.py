"""
Tool registry with automatic discovery.

The registry discovers all MusicalTool subclasses under cordelia.tools and
provides lookup by name. Tools register themselves by being defined there.
"""

import importlib
import inspect
import logging
import pkgutil

from cordelia.tools.base import MusicalTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry of Cordelia tools.

    Usage:
        registry = ToolRegistry()
        registry.discover()

        tool = registry.get("identify_chord")
        result = tool(notes="C,E,G")
    """

    def __init__(self):
        self._tools: dict[str, MusicalTool] = {}

    def register(self, tool: MusicalTool) -> None:
        """
        Register a tool instance.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get(self, name: str) -> MusicalTool | None:
        """Return the tool registered under ``name``, or None."""
        return self._tools.get(name)

    def list_tools(self) -> list[dict]:
        """List all registered tools as dicts (name, description, parameters)."""
        return [tool.to_dict() for tool in self._tools.values()]

    def discover(self, package_name: str = "cordelia.tools") -> int:
        """
        Import every module in ``package_name`` and register its tools.

        Only classes defined in the scanned module are registered, so a tool
        imported elsewhere is not registered twice.

        Returns:
            Number of tools discovered
        """
        package = importlib.import_module(package_name)
        count = 0

        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            package.__path__, prefix=f"{package_name}."
        ):
            module = importlib.import_module(module_name)

            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module.__name__:
                    continue
                if issubclass(obj, MusicalTool) and not inspect.isabstract(obj):
                    self.register(obj())
                    count += 1

        logger.debug("Discovered %d tool(s) in %s", count, package_name)
        return count

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


# Global registry instance
_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """
    Get the global tool registry singleton.

    Auto-discovers tools on first call.
    """
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
