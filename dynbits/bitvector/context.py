"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class SeedWidth(StatefulContext):
    """Control the SeedWidth context.

    Control the bit-width of the unsigned integer used to seed a new
    `BitVector`. Only the low ``width // 8`` bytes of the seed are copied
    into the storage, and seeds that do not fit in the width are rejected.
    By default, the seed is a 64-bit integer.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.context import SeedWidth
        >>> BitVector(40, 0xff00000001)
        BitVector(0b1111111100000000000000000000000000000001, size=40)
        >>> with SeedWidth(32):
        ...     BitVector(40, 0xff00000001)
        Traceback (most recent call last):
         ...
        dynbits.bitvector.core.InvalidArgumentError: seed 0xff00000001 does not fit in 32 bits
        >>> with SeedWidth(32):
        ...     BitVector(40, 0x80000001)
        BitVector(0b0000000010000000000000000000000000000001, size=40)

    """

    current_context = 64

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [8, 16, 32, 64]
        super().__init__(new_context)
