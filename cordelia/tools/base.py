"""
Tool base class and common types.

Every Cordelia tool inherits from MusicalTool and implements execute().
Tools wrap the pure engine in cordelia/core with a uniform, JSON-friendly
calling convention shared by the registry and the HTTP API.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cordelia.core import ChordEngineError


@dataclass(frozen=True)
class ToolParameter:
    """
    Tool parameter specification.

    Attributes:
        name: Parameter name
        type: Python type (str, bool, int)
        description: Human-readable description
        required: Whether parameter is required
        default: Value passed to execute() when the parameter is omitted
    """

    name: str
    type: type
    description: str
    required: bool = True
    default: Any = None

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate a parameter value.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        # bool is an int subclass; keep flags and counts apart
        if self.type is int and isinstance(value, bool):
            return False, f"Parameter '{self.name}' must be int, got bool"

        if not isinstance(value, self.type):
            return (
                False,
                f"Parameter '{self.name}' must be {self.type.__name__}, got {type(value).__name__}",
            )

        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Result from tool execution.

    Attributes:
        success: Whether execution succeeded
        data: Result payload (JSON-serializable)
        error: Error message if success=False
        metadata: Optional metadata (counts, flags)
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class MusicalTool(ABC):
    """
    Abstract base class for Cordelia tools.

    Tools are deterministic: no I/O, no randomness. Subclasses provide
    name, description, parameters and execute(). Calling the instance
    validates parameters first and converts engine errors (bad note,
    bad chord name) into a failed ToolResult.

    Example:
        class IdentifyChord(MusicalTool):
            @property
            def name(self) -> str:
                return "identify_chord"

            def execute(self, **kwargs) -> ToolResult:
                return ToolResult(success=True, data={...})
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool computes."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """Parameters this tool accepts, in positional order."""

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate all input parameters.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for param in self.parameters:
            value = kwargs.get(param.name)
            is_valid, error = param.validate(value)
            if not is_valid:
                return False, error

        return True, None

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """Run the tool with validated parameters, defaults already filled in."""

    def __call__(self, **kwargs) -> ToolResult:
        """
        Validate inputs, fill omitted optional parameters with their
        defaults, then execute.

        Engine errors become ToolResult(success=False); anything else
        propagates to the caller.
        """
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            return ToolResult(success=False, error=error)

        params = {p.name: p.default for p in self.parameters if not p.required}
        params.update((k, v) for k, v in kwargs.items() if v is not None)

        try:
            return self.execute(**params)
        except ChordEngineError as e:
            return ToolResult(success=False, error=str(e))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the tool's name, description and parameter specs."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.__name__,
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                }
                for p in self.parameters
            ],
        }


def split_tokens(raw: str) -> list[str]:
    """Split a comma- or whitespace-separated string into non-empty tokens."""
    return [token for token in raw.replace(",", " ").split() if token]
