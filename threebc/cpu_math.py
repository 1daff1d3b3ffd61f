"""Registers of the arithmetic unit; results land in the accumulator."""

from __future__ import annotations

import math

from .cpu_common import (
    any_param,
    reject_address,
    reject_duality,
    reject_value,
    require_any,
)
from .errors import ErrorCode, VMError
from .opcodes import NB02, NB08, NB10, NB16

_BASES = {NB02: 2, NB08: 8, NB10: 10, NB16: 16}


def _trunc_div(dividend, divisor):
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _finite_trunc(result):
    if not math.isfinite(result):
        raise VMError(ErrorCode.NUMBER_OVERFLOW)
    return math.trunc(result)


def math_sum(vm, reg, address, value):
    """Add the operand to the accumulator."""
    reject_duality(vm, address, value)
    vm.aux = vm.aux + any_param(vm, address, value)


def math_sub(vm, reg, address, value):
    """Subtract the operand from the accumulator."""
    reject_duality(vm, address, value)
    vm.aux = vm.aux - any_param(vm, address, value)


def math_mul(vm, reg, address, value):
    """Multiply the accumulator by the operand."""
    reject_duality(vm, address, value)
    vm.aux = vm.aux * any_param(vm, address, value)


def math_div(vm, reg, address, value):
    """Divide the accumulator by the operand, truncating toward zero."""
    reject_duality(vm, address, value)
    divisor = any_param(vm, address, value)
    if divisor == 0:
        raise VMError(ErrorCode.NUMBER_ZERO)
    vm.aux = _trunc_div(vm.aux, divisor)


def math_mod(vm, reg, address, value):
    """Remainder of the accumulator by the operand, signed like the dividend."""
    reject_duality(vm, address, value)
    divisor = any_param(vm, address, value)
    if divisor == 0:
        raise VMError(ErrorCode.NUMBER_ZERO)
    vm.aux = vm.aux - divisor * _trunc_div(vm.aux, divisor)


def math_power(vm, reg, address, value):
    """Raise the accumulator to the operand, truncating fractional results."""
    reject_duality(vm, address, value)
    base = vm.aux
    exponent = any_param(vm, address, value)
    if exponent >= 0:
        vm.aux = base**exponent
    elif base == 0:
        raise VMError(ErrorCode.NUMBER_ZERO)
    elif base == 1 or (base == -1 and exponent % 2 == 0):
        vm.aux = 1
    elif base == -1:
        vm.aux = -1
    else:
        vm.aux = 0


def math_root(vm, reg, address, value):
    """Take the operand-th root of the accumulator, truncated."""
    reject_duality(vm, address, value)
    degree = any_param(vm, address, value)
    if degree == 0 or (vm.aux == 0 and degree < 0):
        raise VMError(ErrorCode.NUMBER_ZERO)
    try:
        result = math.pow(vm.aux, 1 / degree)
    except ValueError:
        raise VMError(ErrorCode.NUMBER_NEGATIVE) from None
    except OverflowError:
        raise VMError(ErrorCode.NUMBER_OVERFLOW) from None
    vm.aux = _finite_trunc(result)


def math_abs(vm, reg, address, value):
    """Replace the accumulator by its absolute value."""
    reject_address(vm, address)
    reject_value(vm, value)
    vm.aux = abs(vm.aux)


def math_logb(vm, reg, address, value):
    """Logarithm of the accumulator in the operand's base, truncated."""
    reject_duality(vm, address, value)
    require_any(vm, address, value)
    if vm.aux == 0:
        raise VMError(ErrorCode.NUMBER_ZERO)
    if vm.aux < 0:
        raise VMError(ErrorCode.NUMBER_NEGATIVE)
    base = any_param(vm, address, value)
    if base == 2:
        result = math.log2(vm.aux)
    elif base == 10:
        result = math.log10(vm.aux)
    elif base <= 0:
        raise VMError(ErrorCode.NUMBER_NEGATIVE)
    elif base == 1:
        raise VMError(ErrorCode.NUMBER_ZERO)
    else:
        result = math.log(vm.aux) / math.log(base)
    vm.aux = _finite_trunc(result)


def math_logn(vm, reg, address, value):
    """Natural logarithm of the accumulator, truncated."""
    reject_address(vm, address)
    reject_value(vm, value)
    if vm.aux == 0:
        raise VMError(ErrorCode.NUMBER_ZERO)
    if vm.aux < 0:
        raise VMError(ErrorCode.NUMBER_NEGATIVE)
    vm.aux = _finite_trunc(math.log(vm.aux))


def math_mul_add(vm, reg, address, value):
    """Shift the accumulator one digit in the register's base and add the operand."""
    reject_duality(vm, address, value)
    base = _BASES.get(reg, 0)
    vm.aux = vm.aux * base + any_param(vm, address, value)