"""Registers for memory cells, pointers and the accumulator."""

from __future__ import annotations

from .cpu_common import reject_address, reject_value, require_address


def memory_free(vm, reg, address, value):
    """Release the cell at *address*."""
    require_address(vm, address)
    reject_value(vm, value)
    vm.memory.free(address)


def memory_aloc(vm, reg, address, value):
    """Store *value* at *address*."""
    require_address(vm, address)
    vm.memory.set_data(address, value)


def memory_moff(vm, reg, address, value):
    """Clear the configuration bits in *value* at *address*."""
    require_address(vm, address)
    conf = int(vm.memory.get_conf(address)) & ~int(value)
    vm.memory.set_conf(address, conf)


def memory_muse(vm, reg, address, value):
    """Set the configuration bits in *value* at *address*."""
    require_address(vm, address)
    conf = int(vm.memory.get_conf(address)) | int(value)
    vm.memory.set_conf(address, conf)


def ptr_free(vm, reg, address, value):
    """Release the cell that *address* points to."""
    require_address(vm, address)
    reject_value(vm, value)
    vm.memory.free(vm.memory.pointer(address))


def ptr_aloc(vm, reg, address, value):
    """Store *value* in the cell that *address* points to."""
    require_address(vm, address)
    vm.memory.set_data(vm.memory.pointer(address), value)


def ptr_pull(vm, reg, address, value):
    """Store the accumulator in the cell that *address* points to."""
    reject_value(vm, value)
    vm.memory.set_data(vm.memory.pointer(address), vm.aux)


def ptr_push(vm, reg, address, value):
    """Load the cell that *address* points to into the accumulator."""
    reject_value(vm, value)
    vm.aux = vm.memory.get_data(vm.memory.pointer(address))


def ptr_spin(vm, reg, address, value):
    """Swap the accumulator with the cell that *address* points to."""
    reject_value(vm, value)
    previous = vm.aux
    target = vm.memory.pointer(address)
    vm.aux = vm.memory.get_data(target)
    vm.memory.set_data(target, previous)


def aux_free(vm, reg, address, value):
    """Clear the accumulator."""
    reject_address(vm, address)
    reject_value(vm, value)
    vm.aux = 0


def aux_aloc(vm, reg, address, value):
    """Load *value* into the accumulator."""
    reject_address(vm, address)
    vm.aux = value


def aux_pull(vm, reg, address, value):
    """Store the accumulator at *address*."""
    reject_value(vm, value)
    vm.memory.set_data(address, vm.aux)


def aux_push(vm, reg, address, value):
    """Load the cell at *address* into the accumulator."""
    reject_value(vm, value)
    vm.aux = vm.memory.get_data(address)


def aux_spin(vm, reg, address, value):
    """Swap the accumulator with the cell at *address*."""
    reject_value(vm, value)
    previous = vm.aux
    vm.aux = vm.memory.get_data(address)
    vm.memory.set_data(address, previous)