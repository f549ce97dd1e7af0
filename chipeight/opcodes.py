"""Instruction groups and sub-operations understood by the interpreter."""

from enum import IntEnum


class Opcode(IntEnum):
    """Instruction group, taken from the top nibble of an instruction."""

    SYS = 0x0
    JUMP = 0x1
    FUNC = 0x2
    EQ = 0x3
    NE = 0x4
    EQ_VX_VY = 0x5
    SET_VX = 0x6
    ADD_VX = 0x7
    MATH = 0x8
    NE_VX_VY = 0x9
    SET_I = 0xA
    DRAW = 0xD
    KEY = 0xE
    HW = 0xF


class SysOperation(IntEnum):
    """Low byte of a 0x0NNN instruction."""

    CLEAR = 0xE0
    RETURN = 0xEE


class MathOperation(IntEnum):
    """Low nibble of a 0x8XYN instruction."""

    ASSIGN = 0x0
    OR = 0x1
    AND = 0x2
    XOR = 0x3
    ADD = 0x4
    SUB_VX_VY = 0x5
    SHIFT_RIGHT = 0x6
    SUB_VY_VX = 0x7
    SHIFT_LEFT = 0xE


class KeyOperation(IntEnum):
    """Low byte of a 0xEXNN instruction."""

    EQ_KEY_VX = 0x9E
    NE_KEY_VX = 0xA1


class MemoryOperation(IntEnum):
    """Low byte of a 0xFXNN instruction."""

    GET_DELAY = 0x07
    WAIT_KEY = 0x0A
    SET_DELAY = 0x15
    ADD_I_VX = 0x1E
    STORE_BCD = 0x33
    REG_DUMP = 0x55
    REG_LOAD = 0x65