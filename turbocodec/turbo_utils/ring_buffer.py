# ring_buffer.py


class RingBuffer:
    """
    Fixed-capacity circular byte buffer.

    Serves both roles of the Turbo codec:
    - history window (256 bytes): push + slot reads + find,
    - lookahead (16 bytes): FIFO push/pop with independent read/write cursors.
    """

    def __init__(self, capacity: int):
        """
        :param capacity: buffer size (must be a power of two)
        """
        if capacity <= 0 or capacity & (capacity - 1) != 0:
            raise ValueError("Ring buffer capacity must be a power of two")
        self.capacity = capacity
        self.mask = capacity - 1
        self.buffer = bytearray(capacity)
        self.read_pos = 0   # oldest byte
        self.write_pos = 0  # next free slot
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def is_full(self) -> bool:
        return self.size == self.capacity

    def push(self, byte: int):
        """
        Appends one byte. When full, the oldest byte is overwritten.
        """
        self.buffer[self.write_pos] = byte
        self.write_pos = (self.write_pos + 1) & self.mask
        if self.size < self.capacity:
            self.size += 1
        else:
            self.read_pos = (self.read_pos + 1) & self.mask

    def pop(self) -> int:
        """
        Removes and returns the oldest byte.
        """
        if self.size == 0:
            raise IndexError("pop from empty ring buffer")
        byte = self.buffer[self.read_pos]
        self.read_pos = (self.read_pos + 1) & self.mask
        self.size -= 1
        return byte

    def discard(self, count: int):
        """
        Drops `count` bytes from the front.
        """
        if count > self.size:
            raise IndexError("discard past the end of ring buffer")
        self.read_pos = (self.read_pos + count) & self.mask
        self.size -= count

    def peek(self, offset: int) -> int:
        """
        Byte `offset` positions after the oldest one.
        """
        return self.buffer[(self.read_pos + offset) & self.mask]

    def peek_bytes(self, length: int) -> bytes:
        return bytes(self.peek(i) for i in range(length))

    def slot(self, index: int) -> int:
        """
        Byte stored at storage slot `index` (wraps around the capacity).
        """
        return self.buffer[index & self.mask]

    def find(self, data: bytes) -> int:
        """
        Lowest storage slot at which `data` starts inside the filled storage,
        or -1 if there is none.
        """
        # Filled storage is always slots [0, size): a buffer that is not yet
        # full has never wrapped, a full one is filled everywhere.
        return self.buffer.find(data, 0, self.size)
