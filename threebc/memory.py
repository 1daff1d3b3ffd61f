"""Main memory of the virtual machine: data cells with GPIO configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ErrorCode, VMError
from .gpio import Gpio, MemConfig


@dataclass
class _Cell:
    data: int = 0
    conf: int = 0


def _has(conf, bits):
    return (int(conf) & int(bits)) == int(bits)


def validate_config(conf):
    """Raise VMError(MEMORY_CONFIG) when *conf* combines incompatible bits."""
    if not conf:
        return
    forbidden = (
        MemConfig.GPIO_ANAL | MemConfig.GPIO_PULL,
        MemConfig.GPIO_SEND | MemConfig.GPIO_PULL,
        MemConfig.GPIO_SEND | MemConfig.GPIO_READ,
    )
    if any(_has(conf, bits) for bits in forbidden):
        raise VMError(ErrorCode.MEMORY_CONFIG)
    if _has(conf, MemConfig.GPIO_ANAL) and not (
        _has(conf, MemConfig.GPIO_READ) or _has(conf, MemConfig.GPIO_SEND)
    ):
        raise VMError(ErrorCode.MEMORY_CONFIG)


class Memory:
    """Sparse addressable memory; unused cells read as zero."""

    def __init__(self, gpio=None):
        self.gpio = gpio if gpio is not None else Gpio()
        self._cells: dict[int, _Cell] = {}

    def __contains__(self, address):
        return address in self._cells

    def __len__(self):
        return len(self._cells)

    def _cell(self, address):
        return self._cells.setdefault(address, _Cell())

    def get_data(self, address):
        """Return the value at *address*, reading its pin when configured."""
        cell = self._cells.get(address)
        if cell is None:
            return 0
        return self.gpio.input(cell.conf, address, cell.data)

    def set_data(self, address, value):
        """Store *value* at *address*, driving its pin when configured."""
        self.gpio.output(self.get_conf(address), address, value)
        self._cell(address).data = value

    def get_conf(self, address):
        """Return the configuration bits of *address*."""
        cell = self._cells.get(address)
        return cell.conf if cell is not None else 0

    def set_conf(self, address, conf):
        """Apply configuration *conf* to *address* after validating it."""
        value = self._cells[address].data if address in self._cells else 0
        validate_config(conf)
        self.gpio.setup(conf, address)
        self.gpio.output(conf, address, value)
        value = self.gpio.input(conf, address, value)
        cell = self._cell(address)
        cell.conf = conf
        cell.data = value

    def pointer(self, address):
        """Dereference the cell at *address* as an address."""
        ptr = self.get_data(address)
        if ptr == 0:
            raise VMError(ErrorCode.NULL_POINTER)
        if ptr < 0:
            raise VMError(ErrorCode.NUMBER_NEGATIVE)
        return ptr

    def free(self, address):
        """Forget the cell at *address*, resetting its value and configuration."""
        self._cells.pop(address, None)