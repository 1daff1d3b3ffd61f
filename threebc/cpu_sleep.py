"""Registers that pause the virtual machine.

The machine passed as *vm* exposes ``sleeper``, a
:class:`threebc.idle.Sleeper` that tracks the requested pause.
"""

from __future__ import annotations

from .cpu_common import any_param, reject_duality, reject_negative, require_any
from .idle import SleepMode


def _sleep(vm, address, value, mode):
    require_any(vm, address, value)
    reject_duality(vm, address, value)
    reject_negative(vm, address, value)
    vm.sleeper.start(mode, any_param(vm, address, value))


def sleep_real(vm, reg, address, value):
    """Pause for a number of real clock ticks."""
    _sleep(vm, address, value, SleepMode.REAL_TICK)


def sleep_fake(vm, reg, address, value):
    """Pause for a number of machine cycles."""
    _sleep(vm, address, value, SleepMode.FAKE_TICK)


def sleep_micr(vm, reg, address, value):
    """Pause for a number of microseconds."""
    _sleep(vm, address, value, SleepMode.MICROSECONDS)


def sleep_mili(vm, reg, address, value):
    """Pause for a number of milliseconds."""
    _sleep(vm, address, value, SleepMode.MILLISECONDS)


def sleep_seco(vm, reg, address, value):
    """Pause for a number of seconds."""
    _sleep(vm, address, value, SleepMode.SECONDS)