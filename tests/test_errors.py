from threebc.errors import ErrorCode, VMError


def test_first_code_is_base():
    err = VMError(0x3BC000)
    assert err.code is ErrorCode.CPU_ZERO
    assert err.name == "CPU_ZERO"


def test_codes_are_consecutive():
    base = int(ErrorCode.CPU_ZERO)
    codes = [VMError(base + offset).code for offset in range(len(ErrorCode))]
    assert codes == list(ErrorCode)


def test_order_of_codes():
    assert VMError(int(ErrorCode.CPU_ZERO) + 1).code is ErrorCode.CPU_RESERVED
    last = VMError(int(ErrorCode.CHAR_SIZE) + 1)
    assert last.code is ErrorCode.COLUMNS
    assert last.name == "COLUMNS"


def test_vmerror_keeps_enum_code():
    err = VMError(ErrorCode.NUMBER_ZERO)
    assert err.code is ErrorCode.NUMBER_ZERO
    assert err.name == "NUMBER_ZERO"


def test_vmerror_converts_int_code():
    err = VMError(int(ErrorCode.NULL_POINTER))
    assert err.code is ErrorCode.NULL_POINTER


def test_vmerror_unknown_code():
    err = VMError(11)
    assert err.code == 11
    assert err.name == "UNKNOWN"


def test_vmerror_message_contains_name():
    err = VMError(ErrorCode.OPEN_FILE)
    assert "OPEN_FILE" in str(err)


def test_vmerror_message_from_int_code():
    err = VMError(int(ErrorCode.UNSUPPORTED))
    assert err.code is ErrorCode.UNSUPPORTED
    assert "UNSUPPORTED" in str(err)