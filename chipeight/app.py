"""Command that loads a ROM and runs it in a window."""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence

import pygame

from .cpu import PROGRAM_START
from .display import Display
from .keys import Key
from .machine import Chip8

INSTRUCTIONS_PER_STEP = 700
REFRESH_RATE = 60
TICKS_PER_FRAME = INSTRUCTIONS_PER_STEP // REFRESH_RATE
FRAME_DELAY = TICKS_PER_FRAME / 1000
DEFAULT_ROM = "roms/test_opcode.ch8"

KEY_MAP = {
    pygame.K_1: Key.KEY_1,
    pygame.K_2: Key.KEY_2,
    pygame.K_3: Key.KEY_3,
    pygame.K_4: Key.KEY_C,
    pygame.K_q: Key.KEY_4,
    pygame.K_w: Key.KEY_5,
    pygame.K_e: Key.KEY_6,
}


def handle_event(chip8: Chip8, event: pygame.event.Event) -> bool:
    """Apply one window event to the machine; return False when it asks to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        key = KEY_MAP.get(event.key)
        if key is not None:
            chip8.key_interrupt(key, True)
    elif event.type == pygame.KEYUP:
        key = KEY_MAP.get(event.key)
        if key is not None:
            chip8.key_interrupt(key, False)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the emulator on the ROM named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("Hello Chip-8!")
    chip8 = Chip8()
    if len(args) == 1:
        rom_file = args[0]
        print(rom_file)
    else:
        rom_file = DEFAULT_ROM
    try:
        chip8.load_rom(rom_file, PROGRAM_START)
    except (OSError, ValueError) as exc:
        print(f"Error loading ROM: {exc}")
        return 1

    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Error initializing display: {exc}")
        return 1

    display = Display()
    try:
        display.init()
    except RuntimeError as exc:
        print(exc)
        pygame.quit()
        return 1
    chip8.display = display

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(chip8, event):
                    running = False
            for _ in range(TICKS_PER_FRAME):
                chip8.tick()
            chip8.update_timers()
            display.draw(chip8.gpu.buffer)
            time.sleep(FRAME_DELAY)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())