"""Keypad layout of the emulated machine."""

from enum import IntEnum


class Key(IntEnum):
    """Keypad keys, numbered by their position on the 4x4 pad."""

    KEY_1 = 0
    KEY_2 = 1
    KEY_3 = 2
    KEY_C = 3

    KEY_4 = 4
    KEY_5 = 5
    KEY_6 = 6
    KEY_D = 7

    KEY_7 = 8
    KEY_8 = 9
    KEY_9 = 10
    KEY_E = 11

    KEY_A = 12
    KEY_0 = 13
    KEY_B = 14
    KEY_F = 15


NUM_KEYS = len(Key)