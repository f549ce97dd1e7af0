from chipeight.gpu import RES_HEIGHT, RES_WIDTH, Gpu


def test_buffer_starts_dark():
    gpu = Gpu()
    assert len(gpu.buffer) == RES_WIDTH * RES_HEIGHT
    assert not any(gpu.buffer)


def test_draw_lights_pixels_msb_first():
    gpu = Gpu()
    assert gpu.draw(0, 0, 0x80) is False
    assert gpu.buffer[0] == 1
    assert sum(gpu.buffer) == 1


def test_redraw_erases_and_reports_collision():
    gpu = Gpu()
    gpu.draw(10, 5, 0xFF)
    assert gpu.draw(10, 5, 0xFF) is True
    assert not any(gpu.buffer)


def test_draw_on_empty_spot_after_draw_has_no_collision():
    gpu = Gpu()
    gpu.draw(0, 0, 0xF0)
    assert gpu.draw(0, 0, 0x0F) is False
    assert bytes(gpu.buffer[:8]) == bytes([1] * 8)


def test_draw_clips_at_right_edge():
    gpu = Gpu()
    gpu.draw(RES_WIDTH - 4, 0, 0xFF)
    row = gpu.buffer[:RES_WIDTH]
    assert sum(row) == 4
    assert all(row[RES_WIDTH - 4 :])


def test_draw_below_screen_does_nothing():
    gpu = Gpu()
    assert gpu.draw(0, RES_HEIGHT, 0xFF) is False
    assert not any(gpu.buffer)


def test_coordinates_wrap_as_bytes():
    gpu = Gpu()
    gpu.draw(0xFF, 0, 0xFF)
    assert all(gpu.buffer[:7])
    assert sum(gpu.buffer) == 7


def test_clear_resets_all_pixels():
    gpu = Gpu()
    gpu.draw(0, 0, 0xFF)
    gpu.draw(8, RES_HEIGHT - 1, 0xFF)
    gpu.clear()
    assert not any(gpu.buffer)
    assert len(gpu.buffer) == RES_WIDTH * RES_HEIGHT