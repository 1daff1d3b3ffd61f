"""Registers for calling procedures and returning from them.

Besides the attributes listed in :mod:`threebc.cpu_common`, the machine
passed as *vm* exposes ``pc`` (the position of the line being run) and
``call_stack`` (a list of saved positions, most recent last).
"""

from __future__ import annotations

from .cpu_common import reject_address, reject_value, require_value
from .errors import ErrorCode, VMError
from .opcodes import Mode


def _push(vm):
    vm.call_stack.append(vm.pc)


def _pop(vm):
    if not vm.call_stack:
        raise VMError(ErrorCode.INVALID_RETURN)
    return vm.call_stack.pop()


def _call_if(vm, address, value, condition):
    require_value(vm, value)
    reject_address(vm, address)
    if condition(vm.aux):
        _push(vm)
        vm.label_target = value


def _return_if(vm, address, value, condition):
    reject_value(vm, value)
    reject_address(vm, address)
    if condition(vm.aux):
        vm.pc = _pop(vm)
        vm.set_mode(Mode.PROCEDURE)


def procedure_call(vm, reg, address, value):
    """Call the procedure at label *value*."""
    _call_if(vm, address, value, lambda aux: True)


def procedure_back(vm, reg, address, value):
    """Return from the current procedure."""
    _return_if(vm, address, value, lambda aux: True)


def procedure_fcal(vm, reg, address, value):
    """Call label *value* when the accumulator is not zero."""
    _call_if(vm, address, value, lambda aux: aux != 0)


def procedure_zcal(vm, reg, address, value):
    """Call label *value* when the accumulator is zero."""
    _call_if(vm, address, value, lambda aux: aux == 0)


def procedure_pcal(vm, reg, address, value):
    """Call label *value* when the accumulator is positive."""
    _call_if(vm, address, value, lambda aux: aux > 0)


def procedure_ncal(vm, reg, address, value):
    """Call label *value* when the accumulator is negative."""
    _call_if(vm, address, value, lambda aux: aux < 0)


def procedure_fret(vm, reg, address, value):
    """Return when the accumulator is not zero."""
    _return_if(vm, address, value, lambda aux: aux != 0)


def procedure_zret(vm, reg, address, value):
    """Return when the accumulator is zero."""
    _return_if(vm, address, value, lambda aux: aux == 0)


def procedure_pret(vm, reg, address, value):
    """Return when the accumulator is positive."""
    _return_if(vm, address, value, lambda aux: aux > 0)


def procedure_nret(vm, reg, address, value):
    """Return when the accumulator is negative."""
    _return_if(vm, address, value, lambda aux: aux < 0)