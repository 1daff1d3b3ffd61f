# threebc

Building blocks for a virtual machine of the 3BC language: a low-level,
punched-card style instruction set where every line is three columns, a
*register*, an *address* and a *value*. The meaning of a register depends
on the active *cpu mode*, so the same register number can print a
character, add to the accumulator or jump to a label.

The package holds the instruction set, the error codes, the memory, the
pause timer and the instruction handlers for most cpu modes.

## Modules

- `threebc.errors`: `ErrorCode`, every fault a program can cause, and
  `VMError`, the exception raised for them. `VMError.code` holds the
  `ErrorCode` (or the raw integer when it is not a known code).
- `threebc.opcodes`: `Mode`, the cpu modes, and the register constants
  (`NILL`, `MODE`, `STRC`, `STRI`, `GOTO`, `CALL`, `NB10`, ...).
  `mode_name(mode)` returns the name of a mode and raises
  `VMError(INVALID_CPU_MODE)` for unknown numbers; `is_custom_mode(mode)`
  tells whether a mode is one of the four reserved for user registers
  (10, 20, 30, 40).
- `threebc.gpio`: `MemConfig`, the configuration bits of a memory cell,
  and `Gpio`, a software pin bank. It records pin directions
  (`modes`) and written values (`written`); reads come from `levels`,
  which is zero for every pin unless you set it. Analog reads scale
  0..1023 down to 0..255.
- `threebc.memory`: `Memory`, a sparse memory of integer cells, each with
  a value and a configuration. Unused cells read as zero.
  `validate_config(conf)` rejects incompatible pin configurations,
  `Memory.pointer(address)` dereferences a cell and raises on null or
  negative pointers, `Memory.free(address)` forgets a cell.
- `threebc.idle`: `SleepMode` and `Sleeper`, which tracks a pause.
  `Sleeper.start(mode, period)` begins one and `Sleeper.idle()` is polled
  until it returns `False`. The clock is a callable giving nanoseconds
  (`time.monotonic_ns` by default), so it can be replaced in tests.
- Instruction handlers, each called as `handler(vm, reg, address, value)`:
  - `threebc.cpu_common`: parameter checks (`reject_address`,
    `require_value`, `reject_duality`, ...), `any_param` (the memory cell
    at *address* if given, else *value*) and the shared registers
    `null`, `mode`, `not_mode`, `not_exist`, `mode_reserved`.
  - `threebc.cpu_math`: sum, subtraction, multiplication, division and
    remainder truncated toward zero, power, root, absolute value,
    logarithms and `math_mul_add` for building numbers digit by digit.
  - `threebc.cpu_jump`: unconditional and conditional jumps.
  - `threebc.cpu_memory`: memory cells, pointers and the accumulator.
  - `threebc.cpu_procedure`: procedure calls and returns.
  - `threebc.cpu_sleep`: pauses.
  - `threebc.cpu_string`: output, debug output and keyboard input;
    `format_value(reg, value)` renders a value as a character, binary,
    octal, decimal or hexadecimal.

## The machine object

Handlers work on any object that carries the machine state as
attributes: `aux` (the accumulator), `memory`, `label_target`,
`set_mode(value)` and `call_custom(reg, address, value)`; the procedure
handlers also use `pc` and `call_stack`, the sleep handlers `sleeper`,
and the string handlers `output`, `debug` and `keyboard` (text streams,
or `None`).

```python
import io
from types import SimpleNamespace

from threebc import cpu_math, cpu_memory, cpu_string
from threebc.memory import Memory
from threebc.opcodes import STRI

vm = SimpleNamespace(aux=0, memory=Memory(), output=io.StringIO(), debug=None)

cpu_memory.aux_aloc(vm, 2, 0, 40)        # accumulator = 40
cpu_math.math_sum(vm, 1, 0, 2)           # accumulator = 42
cpu_memory.aux_pull(vm, 3, 1, 0)         # memory[1] = 42
cpu_string.string_output(vm, STRI, 1, 0)  # writes "42"

print(vm.output.getvalue())  # 42
```

A pause counted in machine cycles:

```python
from threebc.idle import Sleeper, SleepMode

sleeper = Sleeper()
sleeper.start(SleepMode.FAKE_TICK, 2)
[sleeper.idle() for _ in range(3)]  # [True, True, False]
```

Any fault raises `VMError`:

```python
from threebc.errors import ErrorCode, VMError

try:
    cpu_math.math_div(vm, 1, 0, 0)
except VMError as exc:
    assert exc.code is ErrorCode.NUMBER_ZERO
```

## What is not included

- There is no machine class that holds a program, resolves labels,
  dispatches each line to its handler by cpu mode and steps until the
  end; you supply the machine object described above.
- There are no handlers for the bitwise and boolean cpu modes.
- There is no parser for program text and no command to run programs.
- Pins are simulated in software; nothing talks to real hardware.