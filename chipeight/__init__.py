"""A CHIP-8 virtual machine: processor, frame buffer, keypad and a pygame display."""

__version__ = "0.1.0"