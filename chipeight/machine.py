"""The machine: processor, frame buffer and keypad, with the instruction interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from typing import Optional, Protocol, TypeVar, Union

from .cpu import PROGRAM_START, Cpu
from .gpu import Gpu
from .keys import NUM_KEYS
from .opcodes import (
    KeyOperation,
    MathOperation,
    MemoryOperation,
    Opcode,
    SysOperation,
)

_E = TypeVar("_E", bound=IntEnum)


class _Screen(Protocol):
    def clear(self) -> None: ...


def _lookup(kind: type[_E], value: int) -> Optional[_E]:
    try:
        return kind(value)
    except ValueError:
        return None


@dataclass
class Chip8:
    """A whole machine: processor, frame buffer, optional screen and keypad."""

    cpu: Cpu = field(default_factory=Cpu)
    gpu: Gpu = field(default_factory=Gpu)
    display: Optional[_Screen] = None
    new_press: bool = False
    key_pad: list[bool] = field(default_factory=lambda: [False] * NUM_KEYS)

    def key_interrupt(self, key: int, pressed: bool) -> None:
        """Record a key going down or up."""
        self.new_press = pressed and self.key_pad[key] != pressed
        self.key_pad[key] = pressed

    def load_rom(
        self, rom_file: Union[str, PathLike], start_address: int = PROGRAM_START
    ) -> None:
        """Copy a ROM image into memory at start_address and jump there."""
        print(f"[LOADING] {rom_file}")
        with open(rom_file, "rb") as rom:
            data = rom.read()
        memory = self.cpu.memory
        if start_address < 0 or start_address + len(data) > len(memory):
            raise ValueError(
                f"ROM of {len(data)} bytes does not fit at {start_address:#05x}"
            )
        memory[start_address : start_address + len(data)] = data
        self.cpu.pc = start_address

    def update_timers(self) -> None:
        """Count both timers down by one, stopping at zero."""
        cpu = self.cpu
        cpu.delay_timer = max(cpu.delay_timer - 1, 0)
        cpu.sound_timer = max(cpu.sound_timer - 1, 0)

    def tick(self) -> None:
        """Fetch and execute one instruction."""
        cpu = self.cpu
        regs = cpu.registers
        operation = cpu.read_operation()
        x = (operation >> 8) & 0xF
        y = (operation >> 4) & 0xF
        n = operation & 0xF
        nn = operation & 0xFF
        nnn = operation & 0xFFF

        match _lookup(Opcode, operation >> 12):
            case Opcode.SYS:
                self._system(nn)
            case Opcode.JUMP:
                cpu.pc = nnn
            case Opcode.FUNC:
                cpu.push_to_stack(cpu.pc)
                cpu.pc = nnn
            case Opcode.EQ:
                self._skip_if(regs[x] == nn)
            case Opcode.NE:
                self._skip_if(regs[x] != nn)
            case Opcode.EQ_VX_VY:
                if not operation & 0x1:
                    self._skip_if(regs[x] == regs[y])
            case Opcode.NE_VX_VY:
                if not operation & 0x1:
                    self._skip_if(regs[x] != regs[y])
            case Opcode.SET_VX:
                regs[x] = nn
                self._advance(2)
            case Opcode.ADD_VX:
                regs[x] = (regs[x] + nn) & 0xFF
                self._advance(2)
            case Opcode.MATH:
                self._math(x, y, n)
                self._advance(2)
            case Opcode.SET_I:
                cpu.i = nnn
                self._advance(2)
            case Opcode.DRAW:
                self._draw(x, y, n)
                self._advance(2)
            case Opcode.KEY:
                self._key(x, nn)
            case Opcode.HW:
                self._advance(2)
                self._hardware(x, nn)
            case _:
                pass

    def _advance(self, amount: int) -> None:
        self.cpu.pc = (self.cpu.pc + amount) & 0xFFFF

    def _skip_if(self, condition: bool) -> None:
        self._advance(4 if condition else 2)

    def _system(self, nn: int) -> None:
        cpu = self.cpu
        match _lookup(SysOperation, nn):
            case SysOperation.CLEAR:
                self.gpu.clear()
                if self.display is not None:
                    self.display.clear()
                self._advance(2)
            case SysOperation.RETURN:
                cpu.pc = (cpu.pop_from_stack() + 2) & 0xFFFF
            case _:
                pass

    def _math(self, x: int, y: int, n: int) -> None:
        regs = self.cpu.registers
        match _lookup(MathOperation, n):
            case MathOperation.ASSIGN:
                regs[x] = regs[y]
            case MathOperation.OR:
                regs[x] |= regs[y]
            case MathOperation.AND:
                regs[x] &= regs[y]
            case MathOperation.XOR:
                regs[0xF] = 1 if regs[x] >= regs[y] else 0
                regs[x] ^= regs[y]
            case MathOperation.ADD:
                regs[x] = (regs[x] + regs[y]) & 0xFF
            case MathOperation.SUB_VX_VY:
                regs[x] = (regs[x] - regs[y]) & 0xFF
            case MathOperation.SHIFT_RIGHT:
                regs[x] >>= 1
            case MathOperation.SUB_VY_VX:
                regs[0xF] = 1 if regs[y] >= regs[x] else 0
                regs[x] = (regs[y] - regs[x]) & 0xFF
            case MathOperation.SHIFT_LEFT:
                regs[0xF] = regs[x] >> 7
                regs[x] = (regs[x] << 1) & 0xFF
            case _:
                pass

    def _draw(self, x: int, y: int, height: int) -> None:
        cpu = self.cpu
        regs = cpu.registers
        coord_x, coord_y = regs[x], regs[y]
        regs[0xF] = 0
        for offset in range(height):
            row_data = cpu.memory[cpu.i + offset]
            if self.gpu.draw(coord_x, coord_y + offset, row_data):
                regs[0xF] = 1

    def _key(self, x: int, nn: int) -> None:
        pressed = self.key_pad[self.cpu.registers[x] & 0xF]
        match _lookup(KeyOperation, nn):
            case KeyOperation.EQ_KEY_VX:
                self._skip_if(pressed)
            case KeyOperation.NE_KEY_VX:
                self._skip_if(not pressed)
            case _:
                pass

    def _register_span(self, x: int) -> slice:
        start, end = self.cpu.i, self.cpu.i + x + 1
        if end > len(self.cpu.memory):
            raise IndexError(f"register span {start:#05x}..{end:#05x} outside memory")
        return slice(start, end)

    def _hardware(self, x: int, nn: int) -> None:
        cpu = self.cpu
        regs = cpu.registers
        match _lookup(MemoryOperation, nn):
            case MemoryOperation.GET_DELAY:
                regs[x] = cpu.delay_timer
            case MemoryOperation.SET_DELAY:
                cpu.delay_timer = regs[x]
            case MemoryOperation.WAIT_KEY:
                if not self.new_press:
                    self._advance(-2)
            case MemoryOperation.STORE_BCD:
                value = regs[x]
                index = 2
                while value > 0:
                    cpu.memory[cpu.i + index] = value % 10
                    value //= 10
                    index -= 1
            case MemoryOperation.ADD_I_VX:
                cpu.i = (cpu.i + regs[x]) & 0xFFFF
            case MemoryOperation.REG_DUMP:
                cpu.memory[self._register_span(x)] = regs[: x + 1]
            case MemoryOperation.REG_LOAD:
                regs[: x + 1] = cpu.memory[self._register_span(x)]
            case _:
                pass