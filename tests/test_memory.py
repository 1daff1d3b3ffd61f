import pytest

from threebc.errors import ErrorCode, VMError
from threebc.gpio import Gpio, MemConfig, PinMode
from threebc.memory import Memory, validate_config


@pytest.fixture
def memory():
    return Memory(Gpio())


def test_unused_cell_reads_zero(memory):
    assert memory.get_data(42) == 0
    assert memory.get_conf(42) == 0


def test_data_round_trip(memory):
    memory.set_data(3, -17)
    memory.set_data(4, 99)
    assert memory.get_data(3) == -17
    assert memory.get_data(4) == 99


def test_default_gpio_is_created():
    mem = Memory()
    mem.set_data(1, 7)
    assert mem.get_data(1) == 7


def test_free_resets_cell(memory):
    memory.set_data(5, 12)
    memory.set_conf(5, MemConfig.GPIO_SEND)
    memory.free(5)
    assert 5 not in memory
    assert memory.get_data(5) == 0
    assert memory.get_conf(5) == 0


def test_free_unknown_address_is_harmless(memory):
    memory.set_data(1, 2)
    memory.free(9)
    assert memory.get_data(1) == 2
    assert len(memory) == 1


def test_conf_round_trip(memory):
    memory.set_conf(2, MemConfig.GPIO_READ | MemConfig.GPIO_PULL)
    assert memory.get_conf(2) == MemConfig.GPIO_READ | MemConfig.GPIO_PULL


@pytest.mark.parametrize(
    "conf",
    [
        MemConfig.GPIO_ANAL | MemConfig.GPIO_PULL | MemConfig.GPIO_READ,
        MemConfig.GPIO_SEND | MemConfig.GPIO_PULL,
        MemConfig.GPIO_SEND | MemConfig.GPIO_READ,
        MemConfig.GPIO_ANAL,
    ],
)
def test_invalid_configs(conf):
    with pytest.raises(VMError) as info:
        validate_config(conf)
    assert info.value.code == ErrorCode.MEMORY_CONFIG


@pytest.mark.parametrize(
    "conf",
    [
        0,
        MemConfig.GPIO_SEND,
        MemConfig.GPIO_READ,
        MemConfig.GPIO_READ | MemConfig.GPIO_PULL,
        MemConfig.GPIO_SEND | MemConfig.GPIO_ANAL,
        MemConfig.GPIO_READ | MemConfig.GPIO_ANAL,
    ],
)
def test_valid_configs_are_stored(memory, conf):
    validate_config(conf)
    memory.set_conf(1, conf)
    assert memory.get_conf(1) == conf


def test_invalid_conf_leaves_cell_untouched(memory):
    memory.set_data(8, 5)
    with pytest.raises(VMError):
        memory.set_conf(8, MemConfig.GPIO_SEND | MemConfig.GPIO_READ)
    assert memory.get_conf(8) == 0
    assert memory.get_data(8) == 5


def test_output_pin_driven_on_set(memory):
    memory.set_conf(13, MemConfig.GPIO_SEND)
    assert memory.gpio.modes[13] is PinMode.OUTPUT
    memory.set_data(13, 5)
    assert memory.gpio.written[13] == 1
    assert memory.get_data(13) == 5


def test_analog_output_written_raw(memory):
    memory.set_conf(6, MemConfig.GPIO_SEND | MemConfig.GPIO_ANAL)
    memory.set_data(6, 128)
    assert memory.gpio.written[6] == 128


def test_digital_input_reads_pin(memory):
    memory.gpio.levels[4] = 1
    memory.set_conf(4, MemConfig.GPIO_READ)
    assert memory.gpio.modes[4] is PinMode.INPUT
    assert memory.get_data(4) == 1
    memory.gpio.levels[4] = 0
    assert memory.get_data(4) == 0


def test_analog_input_scaled(memory):
    memory.gpio.levels[2] = 1023
    memory.set_conf(2, MemConfig.GPIO_READ | MemConfig.GPIO_ANAL)
    assert memory.get_data(2) == 255


def test_set_conf_latches_input_value(memory):
    memory.set_data(7, 50)
    memory.set_conf(7, MemConfig.GPIO_READ)
    memory.free(7)
    assert memory.get_data(7) == 0


def test_pointer_dereference(memory):
    memory.set_data(1, 10)
    assert memory.pointer(1) == 10


def test_null_pointer(memory):
    with pytest.raises(VMError) as info:
        memory.pointer(1)
    assert info.value.code == ErrorCode.NULL_POINTER


def test_negative_pointer(memory):
    memory.set_data(1, -3)
    with pytest.raises(VMError) as info:
        memory.pointer(1)
    assert info.value.code == ErrorCode.NUMBER_NEGATIVE