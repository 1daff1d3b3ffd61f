"""General purpose input/output pins attached to memory cells."""

from __future__ import annotations

from enum import Enum, IntFlag


class MemConfig(IntFlag):
    """Configuration bits of a memory cell."""

    NONE = 0
    GPIO_SEND = 0b0001
    GPIO_READ = 0b0010
    GPIO_PULL = 0b0100
    GPIO_ANAL = 0b1000


class PinMode(Enum):
    """Direction a pin was set up for."""

    OUTPUT = "output"
    INPUT_PULLUP = "input_pullup"
    INPUT = "input"


def _has(conf, bits):
    return (int(conf) & int(bits)) == int(bits)


class Gpio:
    """Software pin bank.

    Pin directions and written values are recorded; read values come from
    ``levels`` (raw readings, analog in the 0..1023 range), which defaults
    to zero for every pin, as on a host without real pins.
    """

    def __init__(self):
        self.modes: dict[int, PinMode] = {}
        self.written: dict[int, int] = {}
        self.levels: dict[int, int] = {}

    def setup(self, conf, pin):
        """Configure the direction of *pin* according to *conf*."""
        if not int(conf) & (MemConfig.GPIO_SEND | MemConfig.GPIO_READ):
            return
        if _has(conf, MemConfig.GPIO_SEND):
            self.modes[pin] = PinMode.OUTPUT
        elif _has(conf, MemConfig.GPIO_PULL | MemConfig.GPIO_READ):
            self.modes[pin] = PinMode.INPUT_PULLUP
        elif _has(conf, MemConfig.GPIO_READ):
            self.modes[pin] = PinMode.INPUT

    def output(self, conf, pin, data):
        """Write *data* to *pin* if *conf* marks it as an output."""
        if not conf:
            return
        if _has(conf, MemConfig.GPIO_SEND | MemConfig.GPIO_ANAL):
            self.written[pin] = data
        elif _has(conf, MemConfig.GPIO_SEND):
            self.written[pin] = int(data > 0)

    def input(self, conf, pin, default):
        """Read *pin* if *conf* marks it as an input, else return *default*."""
        if not conf:
            return default
        level = self.levels.get(pin, 0)
        if _has(conf, MemConfig.GPIO_READ | MemConfig.GPIO_ANAL):
            # analog readings span 0..1023; scale down to 0..255
            return level // 4
        if _has(conf, MemConfig.GPIO_READ):
            return int(level > 0)
        return default