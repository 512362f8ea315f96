import pytest

from turbocodec.turbo_utils.ring_buffer import RingBuffer


class TestRingBuffer:
    def test_capacity_must_be_power_of_two(self):
        with pytest.raises(ValueError):
            RingBuffer(3)
        with pytest.raises(ValueError):
            RingBuffer(0)

    def test_fifo_order(self):
        ring = RingBuffer(16)
        for byte in b"hello":
            ring.push(byte)
        assert len(ring) == 5
        assert not ring.is_full()
        assert bytes(ring.pop() for _ in range(5)) == b"hello"
        assert len(ring) == 0

    def test_push_when_full_overwrites_oldest(self):
        ring = RingBuffer(4)
        for byte in (1, 2, 3, 4, 5):
            ring.push(byte)
        assert ring.is_full()
        assert ring.peek(0) == 2
        assert ring.slot(0) == 5
        assert ring.pop() == 2
        assert ring.peek_bytes(3) == b"\x03\x04\x05"

    def test_discard(self):
        ring = RingBuffer(16)
        for byte in range(10):
            ring.push(byte)
        ring.discard(4)
        assert len(ring) == 6
        assert ring.peek(0) == 4
        with pytest.raises(IndexError):
            ring.discard(7)

    def test_pop_empty(self):
        with pytest.raises(IndexError):
            RingBuffer(4).pop()

    def test_find_lowest_index(self):
        ring = RingBuffer(8)
        for byte in b"abcabc":
            ring.push(byte)
        assert ring.find(b"bc") == 1
        assert ring.find(b"ca") == 2
        assert ring.find(b"zz") == -1

    def test_find_ignores_unfilled_slots(self):
        ring = RingBuffer(8)
        for byte in b"ab":
            ring.push(byte)
        assert ring.find(b"\x00") == -1

    def test_slots_after_wrap(self):
        ring = RingBuffer(4)
        for byte in b"abcdXY":
            ring.push(byte)
        assert ring.find(b"Yc") == 1
        assert ring.slot(5) == ord("Y")
        assert ring.peek_bytes(4) == b"cdXY"
