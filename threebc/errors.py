"""Error codes raised by the virtual machine."""

from __future__ import annotations

from enum import IntEnum, auto


class ErrorCode(IntEnum):
    """Every fault the virtual machine can report."""

    CPU_ZERO = 0x3BC000
    CPU_RESERVED = auto()
    INVALID_REGISTER = auto()
    INVALID_ADDRESS = auto()
    INVALID_CONSTANT = auto()
    INVALID_CPU_MODE = auto()
    INVALID_LABEL = auto()
    INVALID_RETURN = auto()
    PARAM_DUALITY = auto()
    PARAM_REQUIRE_ANY = auto()
    PARAM_REQUIRE_VALUE = auto()
    PARAM_REQUIRE_ADDRESS = auto()
    PARAM_BLOCKED_VALUE = auto()
    PARAM_BLOCKED_ADDRESS = auto()
    NUMBER_NO_DIGITS = auto()
    NUMBER_UNDERFLOW = auto()
    NUMBER_OVERFLOW = auto()
    NUMBER_WRONG_BASE = auto()
    NUMBER_NEGATIVE = auto()
    NUMBER_ZERO = auto()
    OUT_OF_MEMORY = auto()
    NONE_TTY = auto()
    UNSUPPORTED = auto()
    MEMORY_CONFIG = auto()
    OPEN_FILE = auto()
    NULL_POINTER = auto()
    CHAR_SCAPE = auto()
    CHAR_SIZE = auto()
    COLUMNS = auto()


class VMError(Exception):
    """A fatal error of the virtual machine, carrying its error code.

    The code is normally an :class:`ErrorCode`; raw integers (for example
    a signal number forwarded as an error) are kept as they are.
    """

    def __init__(self, code):
        try:
            code = ErrorCode(code)
        except ValueError:
            code = int(code)
        self.code = code
        self.name = code.name if isinstance(code, ErrorCode) else "UNKNOWN"
        super().__init__(f"error code 0x{int(code):06X} ({self.name})")