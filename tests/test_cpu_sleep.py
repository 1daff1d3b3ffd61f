import pytest

from threebc import cpu_sleep
from threebc.errors import ErrorCode, VMError
from threebc.idle import Sleeper, SleepMode
from threebc.memory import Memory


class FakeVM:
    def __init__(self):
        self.aux = 0
        self.memory = Memory()
        self.sleeper = Sleeper(clock=lambda: 0)


@pytest.mark.parametrize(
    "func, mode",
    [
        (cpu_sleep.sleep_real, SleepMode.REAL_TICK),
        (cpu_sleep.sleep_fake, SleepMode.FAKE_TICK),
        (cpu_sleep.sleep_micr, SleepMode.MICROSECONDS),
        (cpu_sleep.sleep_mili, SleepMode.MILLISECONDS),
        (cpu_sleep.sleep_seco, SleepMode.SECONDS),
    ],
)
def test_sleep_sets_mode_and_period_from_value(func, mode):
    vm = FakeVM()
    func(vm, 1, 0, 12)
    assert vm.sleeper.mode is mode
    assert vm.sleeper.period == 12


def test_sleep_reads_period_from_memory():
    vm = FakeVM()
    vm.memory.set_data(4, 9)
    cpu_sleep.sleep_seco(vm, 5, 4, 0)
    assert vm.sleeper.period == 9


def test_sleep_requires_a_parameter():
    with pytest.raises(VMError) as exc:
        cpu_sleep.sleep_fake(FakeVM(), 1, 0, 0)
    assert exc.value.code is ErrorCode.PARAM_REQUIRE_ANY


def test_sleep_rejects_duality():
    with pytest.raises(VMError) as exc:
        cpu_sleep.sleep_mili(FakeVM(), 4, 2, 3)
    assert exc.value.code is ErrorCode.PARAM_DUALITY


def test_sleep_rejects_negative_period():
    with pytest.raises(VMError) as exc:
        cpu_sleep.sleep_micr(FakeVM(), 3, 0, -5)
    assert exc.value.code is ErrorCode.NUMBER_NEGATIVE


def test_fake_sleep_idles_for_period_plus_final_poll():
    vm = FakeVM()
    cpu_sleep.sleep_fake(vm, 1, 0, 3)
    polls = [vm.sleeper.idle() for _ in range(4)]
    assert polls == [True, True, True, False]