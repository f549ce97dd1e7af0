"""Processor state: registers, memory, stack and timers."""

from dataclasses import dataclass, field

MEMORY_SIZE = 4096
STACK_SIZE = 16
REGISTER_COUNT = 16
PROGRAM_START = 0x200


class StackError(RuntimeError):
    """Raised on a push to a full stack or a pop from an empty one."""


@dataclass
class Cpu:
    """Registers, memory, call stack and timers of the machine."""

    pc: int = PROGRAM_START
    i: int = 0
    delay_timer: int = 0
    sound_timer: int = 0
    memory: bytearray = field(default_factory=lambda: bytearray(MEMORY_SIZE))
    stack: list[int] = field(default_factory=list)
    registers: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT))

    @property
    def sp(self) -> int:
        """Number of return addresses on the stack."""
        return len(self.stack)

    def push_to_stack(self, value: int) -> None:
        """Push a return address."""
        if len(self.stack) >= STACK_SIZE:
            raise StackError("stack overflow")
        self.stack.append(value & 0xFFFF)

    def pop_from_stack(self) -> int:
        """Pop and return the most recent return address."""
        if not self.stack:
            raise StackError("stack underflow")
        return self.stack.pop()

    def read_operation(self) -> int:
        """Return the big-endian instruction at the program counter."""
        return (self.memory[self.pc] << 8) | self.memory[self.pc + 1]