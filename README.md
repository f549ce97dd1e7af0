# chipeight

A small CHIP-8 virtual machine. It runs CHIP-8 programs (ROM images) and
shows the 64×32 monochrome screen in a pygame window, scaled up twelve
times.

## Installing

```
pip install .
```

This installs the package and pygame.

## Running a program

```
chipeight path/to/program.ch8
```

The ROM is loaded at address `0x200` and execution starts there. If no path
is given, `roms/test_opcode.ch8` is loaded from the current directory. If the
file cannot be read, or does not fit in memory, an error is printed and the
command exits with status 1.

Each frame the command runs 11 instructions, counts the delay and sound
timers down by one, redraws the window and then sleeps for 11 ms.

### Keys

| Keyboard | CHIP-8 key |
|----------|------------|
| 1        | 1          |
| 2        | 2          |
| 3        | 3          |
| 4        | C          |
| Q        | 4          |
| W        | 5          |
| E        | 6          |

Press Escape or close the window to quit.

## Using it as a library

The machine can be driven without a window:

```python
from chipeight.machine import Chip8
from chipeight.keys import Key

chip8 = Chip8()
chip8.load_rom("program.ch8", 0x200)

for _ in range(11):
    chip8.tick()
chip8.update_timers()

chip8.key_interrupt(Key.KEY_5, True)
```

- `chip8.cpu` (`chipeight.cpu.Cpu`) holds the registers, the index register
  `i`, the program counter `pc`, the call stack, the timers and 4 KiB of
  memory. Pushing onto a full 16-entry stack or returning with an empty one
  raises `chipeight.cpu.StackError`.
- `chip8.gpu.buffer` (`chipeight.gpu.Gpu`) holds the 64×32 screen, one value
  of 0 or 1 per pixel, row by row. Sprites are drawn with XOR and clipped at
  the screen edges.
- `chip8.display` is optional; when set, its `clear()` is called by the
  clear-screen instruction.

`chipeight.display.Display` renders a frame buffer with pygame. `init()`
opens a window; alternatively pass a `pygame.Surface` as `surface` to render
off-screen. `chipeight.app.handle_event(chip8, event)` applies one pygame
event to the machine and returns `False` when the event asks to quit.

## What it does not do

- Only the instruction groups listed in `chipeight.opcodes` are executed:
  there is no jump-with-offset (`BNNN`), no random numbers (`CXNN`), no
  sound-timer setting (`FX18`) and no built-in font (`FX29`).
- Nothing is played while the sound timer runs.
- Only seven keypad keys are reachable from the keyboard.

## Running the tests

```
pip install .[test]
pytest
```