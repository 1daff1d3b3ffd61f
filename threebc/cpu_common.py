"""Parameter checks and the registers shared by every CPU mode.

Every instruction handler takes ``(vm, reg, address, value)``. The machine
passed as *vm* exposes ``aux`` (the accumulator), ``memory``,
``label_target``, ``set_mode(value)`` and ``call_custom(reg, address, value)``.
"""

from __future__ import annotations

from .errors import ErrorCode, VMError


def reject_address(vm, address):
    """Fail when an address was given to a register that takes none."""
    if address:
        raise VMError(ErrorCode.PARAM_BLOCKED_ADDRESS)


def reject_value(vm, value):
    """Fail when a value was given to a register that takes none."""
    if value:
        raise VMError(ErrorCode.PARAM_BLOCKED_VALUE)


def reject_duality(vm, address, value):
    """Fail when both an address and a value were given."""
    if address and value:
        raise VMError(ErrorCode.PARAM_DUALITY)


def require_value(vm, value):
    """Fail when the register needs a value and none was given."""
    if not value:
        raise VMError(ErrorCode.PARAM_REQUIRE_VALUE)


def require_address(vm, address):
    """Fail when the register needs an address and none was given."""
    if not address:
        raise VMError(ErrorCode.PARAM_REQUIRE_ADDRESS)


def require_any(vm, address, value):
    """Fail when neither an address nor a value was given."""
    if not address and not value:
        raise VMError(ErrorCode.PARAM_REQUIRE_ANY)


def any_param(vm, address, value):
    """Return the operand: the memory cell at *address* if given, else *value*."""
    return vm.memory.get_data(address) if address else value


def reject_negative(vm, address, value):
    """Fail when the operand is negative."""
    if any_param(vm, address, value) < 0:
        raise VMError(ErrorCode.NUMBER_NEGATIVE)


def null(vm, reg, address, value):
    """Execute the NILL register: a line that leaves the machine unchanged."""
    # The NILL register is a deliberate no-op; its operands are ignored.
    return None


def mode(vm, reg, address, value):
    """Switch the CPU mode to *value*."""
    reject_address(vm, address)
    vm.set_mode(value)


def not_mode(vm, reg, address, value):
    """Report a register used while no CPU mode is selected."""
    raise VMError(ErrorCode.CPU_ZERO)


def not_exist(vm, reg, address, value):
    """Report a register that does not exist in the current mode."""
    raise VMError(ErrorCode.INVALID_REGISTER)


def mode_reserved(vm, reg, address, value):
    """Forward the line to a user-defined register."""
    vm.call_custom(reg, address, value)