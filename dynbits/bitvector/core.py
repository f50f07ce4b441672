"""Provide the dynamically-sized bit-vector type."""
from dynbits.bitvector import context


class InvalidArgumentError(ValueError):
    """Raised when a size, a shift amount or an operand is not valid."""


class OutOfRangeError(IndexError):
    """Raised when a bit index is outside ``[0, size)``."""


#: Number of bits set in each byte value (0-255).
_BYTE_COUNTS = bytes(bin(byte).count("1") for byte in range(256))


def _check_int(value, name):
    if not isinstance(value, int):
        msg = "{} must be an int, not '{}'"
        raise TypeError(msg.format(name, type(value).__name__))


class BitVector(object):
    """Represent a resizable sequence of bits.

    The bits are packed in a `bytearray`, eight bits per byte. The bit
    of index ``i`` is the bit ``i % 8`` of the byte ``i // 8``, so
    index 0 is the least significant bit of the first byte.
    The unused high bits of the last byte (the *padding* bits) are
    always zero.

    Args:
        num_bits: the number of bits (0 by default).
        value: an unsigned integer whose low bytes seed the storage,
            least significant byte first. Its bit-width is given by
            the `SeedWidth` context. Seed bits beyond ``num_bits``
            are discarded.

    ::

        >>> from dynbits.bitvector.core import BitVector
        >>> BitVector()
        BitVector(size=0)
        >>> BitVector(8, 0b00001011)
        BitVector(0b00001011, size=8)
        >>> BitVector(4, 0xff).vrepr()
        'BitVector(0b1111, size=4)'
        >>> print(BitVector(8, 0b00001011))
        00001011

    Bit-vectors support the bitwise operators ``~``, ``&``, ``|``, ``^``
    and the logical shifts ``<<`` and ``>>``, together with their
    in-place versions. See `operation` for more information.

        >>> x = BitVector(8, 0b00001011)
        >>> print(x << 2, x >> 2, ~x)
        00101100 00000010 11110100
        >>> x.count(), x.any(), x.none()
        (3, True, False)

    Bit-vectors are mutable values: copies never share storage.

        >>> y = x.copy()
        >>> y.set(7)
        BitVector(0b10001011, size=8)
        >>> x == y
        False

    """

    __slots__ = ["_data", "_size"]

    __hash__ = None

    def __init__(self, num_bits=0, value=0):
        _check_int(num_bits, "num_bits")
        _check_int(value, "value")
        if num_bits < 0:
            raise InvalidArgumentError("size cannot be negative")
        seed_width = context.SeedWidth.current_context
        if not 0 <= value < 2 ** seed_width:
            msg = "seed {} does not fit in {} bits"
            raise InvalidArgumentError(msg.format(hex(value), seed_width))

        self._size = num_bits
        self._data = bytearray((num_bits + 7) // 8)

        seed = value.to_bytes(seed_width // 8, "little")
        length = min(len(seed), len(self._data))
        self._data[:length] = seed[:length]
        self._normalize()

    @classmethod
    def from_string(cls, bits):
        """Return the bit-vector rendered by the given string.

        The string is read as `to_string` writes it, most significant
        bit first.

            >>> from dynbits.bitvector.core import BitVector
            >>> BitVector.from_string("101")
            BitVector(0b101, size=3)
            >>> BitVector.from_string("")
            BitVector(size=0)
            >>> BitVector.from_string("12")
            Traceback (most recent call last):
             ...
            dynbits.bitvector.core.InvalidArgumentError: invalid bit character '2'

        """
        if not isinstance(bits, str):
            msg = "expected a str, not '{}'"
            raise TypeError(msg.format(type(bits).__name__))
        bv = cls(len(bits))
        for index, char in enumerate(reversed(bits)):
            if char == "1":
                bv._data[index // 8] |= 1 << (index % 8)
            elif char != "0":
                raise InvalidArgumentError(
                    "invalid bit character {!r}".format(char))
        return bv

    # Storage

    def _normalize(self):
        """Clear the padding bits of the last byte."""
        used = self._size % 8
        if used:
            self._data[-1] &= (1 << used) - 1

    def _check_index(self, index):
        _check_int(index, "index")
        if index < 0 or index >= self._size:
            msg = "bit index {} out of range for size {}"
            raise OutOfRangeError(msg.format(index, self._size))

    @property
    def storage(self):
        """A snapshot of the underlying bytes, least significant first."""
        return bytes(self._data)

    def copy(self):
        """Return an independent copy of the bit-vector."""
        bv = type(self).__new__(type(self))
        bv._data = bytearray(self._data)
        bv._size = self._size
        return bv

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def swap(self, other):
        """Exchange the contents of two bit-vectors.

            >>> from dynbits.bitvector.core import BitVector
            >>> x, y = BitVector(2, 1), BitVector(5, 0b11000)
            >>> x.swap(y)
            >>> x, y
            (BitVector(0b11000, size=5), BitVector(0b01, size=2))

        """
        if not isinstance(other, BitVector):
            msg = "cannot swap a BitVector with '{}'"
            raise TypeError(msg.format(type(other).__name__))
        self._data, other._data = other._data, self._data
        self._size, other._size = other._size, self._size

    # Resizing

    def resize(self, new_size, fill=False):
        """Change the number of bits.

        The bytes added when growing are filled with 1s if *fill* is True;
        the bits gained inside the old last byte stay 0. Shrinking drops
        the most significant bits and keeps the others untouched.

            >>> from dynbits.bitvector.core import BitVector
            >>> x = BitVector(3, 0b101)
            >>> x.resize(10, True)
            >>> x
            BitVector(0b1100000101, size=10)
            >>> x.resize(2)
            >>> x
            BitVector(0b01, size=2)

        """
        _check_int(new_size, "new_size")
        if new_size < 0:
            raise InvalidArgumentError("size cannot be negative")

        new_length = (new_size + 7) // 8
        if new_length > len(self._data):
            filler = 0xff if fill else 0x00
            self._data.extend(bytes([filler]) * (new_length - len(self._data)))
        else:
            del self._data[new_length:]

        self._size = new_size
        self._normalize()

    def clear(self):
        """Remove all the bits."""
        self._data = bytearray()
        self._size = 0

    def push_back(self, bit):
        """Append a bit after the most significant one.

            >>> from dynbits.bitvector.core import BitVector
            >>> x = BitVector(0)
            >>> for bit in [True, False, True]:
            ...     x.push_back(bit)
            >>> print(x)
            101

        """
        self.resize(self._size + 1)
        self.set(self._size - 1, bit)

    # Single-bit access

    def set(self, index=None, value=True):
        """Set the bit *index* to *value*, or all the bits if no index is given."""
        if index is None:
            filler = b"\xff" if value else b"\x00"
            self._data[:] = filler * len(self._data)
            self._normalize()
            return self

        self._check_index(index)
        if value:
            self._data[index // 8] |= 1 << (index % 8)
        else:
            self._data[index // 8] &= ~(1 << (index % 8)) & 0xff
        return self

    def reset(self, index=None):
        """Clear the bit *index*, or all bits if no index."""
        return self.set(index, False)

    def at(self, index):
        """Return the bit *index* as a bool."""
        self._check_index(index)
        return bool((self._data[index // 8] >> (index % 8)) & 1)

    def __getitem__(self, key):
        """Override [] operator."""
        if isinstance(key, int):
            return self.at(key)
        else:
            raise TypeError("invalid index")

    def __setitem__(self, key, value):
        if isinstance(key, int):
            self.set(key, value)
        else:
            raise TypeError("invalid index")

    def __iter__(self):
        for index in range(self._size):
            yield self.at(index)

    def __len__(self):
        return self._size

    # Aggregate queries

    def size(self):
        """Return the number of bits."""
        return self._size

    def empty(self):
        """Return True if the bit-vector has no bits."""
        return self._size == 0

    def count(self):
        """Return the number of bits set to 1."""
        return sum(_BYTE_COUNTS[byte] for byte in self._data)

    def any(self):
        """Return True if some bit is set to 1."""
        return any(self._data)

    def none(self):
        """Return True if no bit is set to 1."""
        return not self.any()

    def to_string(self):
        """Return the bits as a string of 0s and 1s, most significant first."""
        return str(self)

    def __str__(self):
        """Return the non-verbose string representation."""
        from dynbits.bitvector import printing
        return (printing.BvStrPrinter()).doprint(self)

    def vrepr(self):
        """Return a verbose string representation."""
        from dynbits.bitvector import printing
        return (printing.BvReprPrinter()).doprint(self)

    __repr__ = vrepr

    # Relational operators

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, BitVector):
            return self._size == other._size and self._data == other._data
        else:
            return NotImplemented

    # Bitwise operators

    def __invert__(self):
        """Override ~ operator."""
        from dynbits.bitvector import operation
        return operation.BvNot(self)

    def __and__(self, other):
        """Override & operator."""
        from dynbits.bitvector import operation
        return operation.BvAnd(self, other)

    def __iand__(self, other):
        """Override &= operator."""
        from dynbits.bitvector import operation
        return operation.BvAnd.apply(self, other)

    def __or__(self, other):
        """Override | operator."""
        from dynbits.bitvector import operation
        return operation.BvOr(self, other)

    def __ior__(self, other):
        """Override |= operator."""
        from dynbits.bitvector import operation
        return operation.BvOr.apply(self, other)

    def __xor__(self, other):
        """Override ^ operator."""
        from dynbits.bitvector import operation
        return operation.BvXor(self, other)

    def __ixor__(self, other):
        """Override ^= operator."""
        from dynbits.bitvector import operation
        return operation.BvXor.apply(self, other)

    # Shifts

    def __lshift__(self, other):
        """Override << operator."""
        from dynbits.bitvector import operation
        return operation.BvShl(self, other)

    def __ilshift__(self, other):
        """Override <<= operator."""
        from dynbits.bitvector import operation
        return operation.BvShl.apply(self, other)

    def __rshift__(self, other):
        """Override >> operator."""
        from dynbits.bitvector import operation
        return operation.BvLshr(self, other)

    def __irshift__(self, other):
        """Override >>= operator."""
        from dynbits.bitvector import operation
        return operation.BvLshr.apply(self, other)
