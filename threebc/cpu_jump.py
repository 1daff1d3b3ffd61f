"""Registers for unconditional and conditional jumps to labels."""

from __future__ import annotations

from .cpu_common import reject_address, require_value


def _jump_if(vm, address, value, condition):
    require_value(vm, value)
    reject_address(vm, address)
    if condition(vm.aux):
        vm.label_target = value


def jump_goto(vm, reg, address, value):
    """Jump to label *value*."""
    _jump_if(vm, address, value, lambda aux: True)


def jump_fgto(vm, reg, address, value):
    """Jump to label *value* when the accumulator is not zero."""
    _jump_if(vm, address, value, lambda aux: aux != 0)


def jump_zgto(vm, reg, address, value):
    """Jump to label *value* when the accumulator is zero."""
    _jump_if(vm, address, value, lambda aux: aux == 0)


def jump_pgto(vm, reg, address, value):
    """Jump to label *value* when the accumulator is positive."""
    _jump_if(vm, address, value, lambda aux: aux > 0)


def jump_ngto(vm, reg, address, value):
    """Jump to label *value* when the accumulator is negative."""
    _jump_if(vm, address, value, lambda aux: aux < 0)