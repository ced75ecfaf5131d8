"""
Errors — Structured failures raised while selecting and wrapping JS output.

Both output errors signal a malformed transform result upstream. They carry
typed fields so callers branch on the error kind instead of parsing messages.
"""

from typing import Any, Optional

UNKNOWN_MODULE = "unknown module"


class ModuleOutputError(Exception):
    """Base class for invariant violations on a module's outputs."""

    def __init__(self, module_path: Optional[str], message: str):
        self.module_path = module_path if module_path is not None else UNKNOWN_MODULE
        super().__init__(message)


class WrongOutputCount(ModuleOutputError):
    """A module does not have exactly one JS output."""

    def __init__(self, module_path: Optional[str], count: int, expected: int = 1):
        self.count = count
        self.expected = expected
        path = module_path if module_path is not None else UNKNOWN_MODULE
        super().__init__(
            module_path,
            f"Modules must have exactly {expected} JS output, "
            f"but {path} has {count} JS outputs.",
        )

    def __reduce__(self):
        return (type(self), (self.module_path, self.count, self.expected))


class InvalidLineCount(ModuleOutputError):
    """The selected JS output does not carry a finite line count."""

    def __init__(self, module_path: Optional[str], output_type: str, value: Any):
        self.output_type = output_type
        self.value = value
        path = module_path if module_path is not None else UNKNOWN_MODULE
        super().__init__(
            module_path,
            f"JS output must populate lineCount, but {path} has "
            f"{output_type} output with lineCount '{value!r}'",
        )

    def __reduce__(self):
        return (type(self), (self.module_path, self.output_type, self.value))


class InjectionError(Exception):
    """The parameter injector could not find a call to extend."""
