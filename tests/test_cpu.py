import pytest

from chipeight.cpu import MEMORY_SIZE, PROGRAM_START, STACK_SIZE, Cpu, StackError


def test_initial_state():
    cpu = Cpu()
    assert cpu.pc == 0x200 == PROGRAM_START
    assert len(cpu.memory) == MEMORY_SIZE
    assert cpu.sp == 0
    assert not any(cpu.registers)


def test_stack_is_last_in_first_out():
    cpu = Cpu()
    cpu.push_to_stack(0x200)
    cpu.push_to_stack(0x300)
    assert cpu.sp == 2
    assert cpu.pop_from_stack() == 0x300
    assert cpu.pop_from_stack() == 0x200
    assert cpu.sp == 0


def test_stack_overflow_raises():
    cpu = Cpu()
    for address in range(STACK_SIZE):
        cpu.push_to_stack(address)
    with pytest.raises(StackError):
        cpu.push_to_stack(0x400)
    assert cpu.sp == STACK_SIZE


def test_pop_from_empty_stack_raises():
    with pytest.raises(StackError):
        Cpu().pop_from_stack()


def test_read_operation_is_big_endian():
    cpu = Cpu()
    cpu.memory[cpu.pc : cpu.pc + 2] = bytes([0xA2, 0xF0])
    assert cpu.read_operation() == 0xA2F0


def test_read_operation_past_memory_end_raises():
    cpu = Cpu(pc=MEMORY_SIZE - 1)
    with pytest.raises(IndexError):
        cpu.read_operation()


def test_instances_do_not_share_memory():
    first, second = Cpu(), Cpu()
    first.memory[0] = 0xFF
    first.push_to_stack(0x200)
    assert second.memory[0] == 0
    assert second.sp == 0