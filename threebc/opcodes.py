"""CPU modes and register opcodes of the virtual machine."""

from __future__ import annotations

from enum import IntEnum

from .errors import ErrorCode, VMError


class Mode(IntEnum):
    """CPU modes: each selects how the registers of a line are interpreted."""

    EMPTY = 0
    DEBUG = 1
    STRING = 2
    INPUT = 3
    INPUT_SILENT = 4
    INPUT_PASSWORD = 5
    MEMORY = 6
    MEMORY_PTR = 7
    MEMORY_AUX = 8
    JUMP = 9
    CUSTOM_1 = 10
    MATH_SUM = 11
    MATH_SUB = 12
    MATH_MUL = 13
    MATH_DIV = 14
    MATH_MOD = 15
    MATH_POWER = 16
    MATH_ROOT = 17
    MATH_ABS = 18
    MATH_MUL_ADD = 19
    CUSTOM_2 = 20
    BITWISE_NOT = 21
    BITWISE_AND = 22
    BITWISE_OR = 23
    BITWISE_XOR = 24
    BITWISE_NAND = 25
    BITWISE_NOR = 26
    BITWISE_XNOR = 27
    BITWISE_LEFT = 28
    BITWISE_RIGHT = 29
    CUSTOM_3 = 30
    BOOLEAN_NOT = 31
    BOOLEAN_AND = 32
    BOOLEAN_OR = 33
    BOOLEAN_XOR = 34
    BOOLEAN_NAND = 35
    BOOLEAN_NOR = 36
    BOOLEAN_XNOR = 37
    MATH_LOG_BASE = 38
    MATH_LOG_NATURAL = 39
    CUSTOM_4 = 40
    PROCEDURE_RET = 41
    PROCEDURE = 42
    SLEEP = 43
    END = 44


CUSTOM_MODES = frozenset({Mode.CUSTOM_1, Mode.CUSTOM_2, Mode.CUSTOM_3, Mode.CUSTOM_4})

# Registers; several names share a code and differ only by CPU mode.
NILL = 0b000
MODE = 0b111

STRB = FREE = MATH = GOTO = NB02 = CALL = BACK = FAKE = 0b001
STRO = ALOC = FGTO = NB08 = STOP = FRET = FCAL = REAL = 0b010
STRI = MOFF = PULL = ZGTO = NB10 = ZRET = ZCAL = MICR = 0b011
STRX = PGTO = MUSE = SPIN = NB16 = PRET = PCAL = MILI = 0b100
STRC = NGTO = PUSH = NRET = NCAL = SECO = 0b101


def is_custom_mode(mode):
    """Return True when *mode* is reserved for user-defined registers."""
    return mode in CUSTOM_MODES


def mode_name(mode):
    """Return the name of a CPU mode, raising VMError for unknown modes."""
    try:
        return Mode(mode).name
    except ValueError:
        raise VMError(ErrorCode.INVALID_CPU_MODE) from None