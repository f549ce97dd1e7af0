import pytest

from chipeight.opcodes import (
    KeyOperation,
    MathOperation,
    MemoryOperation,
    Opcode,
    SysOperation,
)


@pytest.mark.parametrize(
    "instruction, expected",
    [
        (0x00E0, Opcode.SYS),
        (0x1ABC, Opcode.JUMP),
        (0x2ABC, Opcode.FUNC),
        (0x8014, Opcode.MATH),
        (0xA300, Opcode.SET_I),
        (0xD015, Opcode.DRAW),
        (0xF065, Opcode.HW),
    ],
)
def test_group_from_top_nibble(instruction, expected):
    assert Opcode(instruction >> 12) is expected


@pytest.mark.parametrize("nibble", [0xB, 0xC])
def test_unhandled_groups_are_not_opcodes(nibble):
    with pytest.raises(ValueError):
        Opcode(nibble)


def test_sys_operations_from_low_byte():
    assert SysOperation(0x00EE & 0xFF) is SysOperation.RETURN
    assert SysOperation(0x00E0 & 0xFF) is SysOperation.CLEAR


def test_math_shift_left_uses_nibble_e():
    assert MathOperation(0x801E & 0xF) is MathOperation.SHIFT_LEFT
    with pytest.raises(ValueError):
        MathOperation(0x8)


def test_key_operations_from_low_byte():
    assert KeyOperation(0xE09E & 0xFF) is KeyOperation.EQ_KEY_VX
    assert KeyOperation(0xE0A1 & 0xFF) is KeyOperation.NE_KEY_VX


def test_memory_operations_from_low_byte():
    assert MemoryOperation(0xF033 & 0xFF) is MemoryOperation.STORE_BCD
    assert MemoryOperation(0xF065 & 0xFF) is MemoryOperation.REG_LOAD
    with pytest.raises(ValueError):
        MemoryOperation(0x18)