"""Registers for text output, debug output and keyboard input.

The machine passed as *vm* exposes ``output`` and ``debug`` (writable text
streams, or None to discard) and ``keyboard`` (a readable text stream, or
None when there is no input). Echo of typed input goes to ``output``.
"""

from __future__ import annotations

from .cpu_common import any_param, reject_duality, reject_value
from .errors import ErrorCode, VMError
from .opcodes import STRB, STRC, STRI, STRO, STRX

_FORMATS = {STRB: "b", STRO: "o", STRI: "d", STRX: "x"}
_BASES = {STRB: 2, STRO: 8, STRI: 10, STRX: 16}


def format_value(reg, value):
    """Render *value* as text in the representation selected by *reg*."""
    if reg == STRC:
        try:
            return chr(value)
        except (ValueError, OverflowError):
            raise VMError(ErrorCode.CHAR_SIZE) from None
    spec = _FORMATS.get(reg)
    if spec is None:
        raise VMError(ErrorCode.INVALID_REGISTER)
    return format(value, spec)


def _write(stream, text):
    if stream is not None:
        stream.write(text)


def _read(vm, reg):
    stream = vm.keyboard
    if stream is None:
        raise VMError(ErrorCode.NONE_TTY)
    if reg == STRC:
        char = stream.read(1)
        return ord(char) if char else 0
    base = _BASES.get(reg)
    if base is None:
        raise VMError(ErrorCode.INVALID_REGISTER)
    text = stream.readline().strip()
    if not text:
        raise VMError(ErrorCode.NUMBER_NO_DIGITS)
    try:
        return int(text, base)
    except ValueError:
        raise VMError(ErrorCode.NUMBER_WRONG_BASE) from None


def _take_input(vm, reg, address, value):
    reject_value(vm, value)
    data = _read(vm, reg)
    vm.aux = data
    vm.memory.set_data(address, data)
    return data


def string_debug(vm, reg, address, value):
    """Write the operand to the debug stream."""
    reject_duality(vm, address, value)
    _write(vm.debug, format_value(reg, any_param(vm, address, value)))


def string_output(vm, reg, address, value):
    """Write the operand to the output stream."""
    reject_duality(vm, address, value)
    _write(vm.output, format_value(reg, any_param(vm, address, value)))


def string_input(vm, reg, address, value):
    """Read a value into the accumulator and *address*, echoing it."""
    data = _take_input(vm, reg, address, value)
    _write(vm.output, format_value(reg, data))


def string_input_silent(vm, reg, address, value):
    """Read a value into the accumulator and *address* without echo."""
    _take_input(vm, reg, address, value)


def string_input_password(vm, reg, address, value):
    """Read a value into the accumulator and *address*, echoing a mask."""
    _take_input(vm, reg, address, value)
    _write(vm.output, format_value(STRC, ord("*")))