"""Monochrome frame buffer with XOR sprite drawing."""

from dataclasses import dataclass, field

RES_WIDTH = 64
RES_HEIGHT = 32


@dataclass
class Gpu:
    """Frame buffer of RES_WIDTH x RES_HEIGHT pixels, one byte (0 or 1) each."""

    buffer: bytearray = field(
        default_factory=lambda: bytearray(RES_WIDTH * RES_HEIGHT)
    )

    def clear(self) -> None:
        """Turn every pixel off."""
        self.buffer[:] = bytes(len(self.buffer))

    def draw(self, x: int, y: int, row_data: int) -> bool:
        """XOR an 8-pixel sprite row at (x, y); return True if a lit pixel was turned off."""
        y &= 0xFF
        if y >= RES_HEIGHT:
            return False
        collided = False
        for px in range(8):
            col = (x + px) & 0xFF
            bit = (row_data >> (7 - px)) & 0x1
            if col < RES_WIDTH:
                index = y * RES_WIDTH + col
                if bit and self.buffer[index]:
                    collided = True
                self.buffer[index] ^= bit
        return collided