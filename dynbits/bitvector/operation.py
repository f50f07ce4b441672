"""Provide the bitwise and shift operators of bit-vectors."""
from dynbits.bitvector import core


# noinspection PyProtectedMember
class Operation(object):
    """Represent bit-vector operators.

    A bit-vector operator takes some bit-vector operands (i.e. `BitVector`)
    followed by some scalar operands (i.e. `int`), and computes a single
    bit-vector.

    Calling the operator returns a new bit-vector and leaves the operands
    untouched, while `apply` stores the result in the first operand::

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvAnd
        >>> x, y = BitVector(4, 0b1100), BitVector(4, 0b1010)
        >>> BvAnd(x, y)
        BitVector(0b1000, size=4)
        >>> x
        BitVector(0b1100, size=4)
        >>> BvAnd.apply(x, y)
        BitVector(0b1000, size=4)
        >>> x
        BitVector(0b1000, size=4)

    The operands are validated before the first operand is modified,
    so a failed operation leaves every operand unchanged.

    This class is not meant to be instantiated but to provide a base
    class for the different operators.

    Attributes:
        arity: a pair of numbers specifying the number of bit-vector
            operands (at least one) and scalar operands.
        is_symmetric: True if the operator is symmetric with respect to
            its operands.
        unary_symbol: the symbol of the unary operator (optional)
        infix_symbol: the symbol of the binary operator (optional)

    .. Implementation details:

        Subclasses must implement eval(), which overwrites the storage
        of its first argument with the result and must leave the padding
        bits cleared.

    """

    arity = None
    is_symmetric = False

    def __new__(cls, *args):
        args = cls._parse_args(*args)
        result = args[0].copy()
        cls.eval(result, *args[1:])
        return result

    @classmethod
    def apply(cls, target, *args):
        """Replace *target* by the result of the operation and return it."""
        cls._parse_args(target, *args)
        cls.eval(target, *args)
        return target

    @classmethod
    def _parse_args(cls, *args):
        assert len(args) == sum(cls.arity)

        bv_args = args[:cls.arity[0]]
        for arg in bv_args:
            if not isinstance(arg, core.BitVector):
                msg = "{} expected BitVector operands, not '{}'"
                raise TypeError(msg.format(cls.__name__, type(arg).__name__))

        sizes = [arg.size() for arg in bv_args]
        if len(set(sizes)) > 1:
            msg = "size mismatch in {} ({})"
            raise core.InvalidArgumentError(
                msg.format(cls.__name__, ", ".join(str(s) for s in sizes)))

        return args

    @classmethod
    def eval(cls, *args):
        """Evaluate the operator in place over its first argument."""
        raise NotImplementedError("subclasses need to override this method")


# Bitwise operators

# noinspection PyProtectedMember
class BvNot(Operation):
    """Bitwise negation operation.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvNot
        >>> BvNot(BitVector(4, 0b1010))
        BitVector(0b0101, size=4)
        >>> ~BitVector(3, 0b001)
        BitVector(0b110, size=3)

    """

    arity = [1, 0]
    is_symmetric = False
    unary_symbol = "~"

    @classmethod
    def eval(cls, x):
        x._data[:] = bytes(~byte & 0xff for byte in x._data)
        x._normalize()


# noinspection PyProtectedMember
class BvAnd(Operation):
    """Bitwise AND (logical conjunction) operation.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvAnd
        >>> BvAnd(BitVector(4, 0b0011), BitVector(4, 0b0101))
        BitVector(0b0001, size=4)
        >>> BitVector(4, 0b0011) & BitVector(4, 0b0101)
        BitVector(0b0001, size=4)
        >>> BitVector(3) & BitVector(5)
        Traceback (most recent call last):
         ...
        dynbits.bitvector.core.InvalidArgumentError: size mismatch in BvAnd (3, 5)

    """

    arity = [2, 0]
    is_symmetric = True
    infix_symbol = "&"

    @classmethod
    def eval(cls, x, y):
        for i, byte in enumerate(y._data):
            x._data[i] &= byte


# noinspection PyProtectedMember
class BvOr(Operation):
    """Bitwise OR (logical disjunction) operation.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvOr
        >>> BvOr(BitVector(4, 0b0011), BitVector(4, 0b0101))
        BitVector(0b0111, size=4)
        >>> BitVector(4, 0b0011) | BitVector(4, 0b0101)
        BitVector(0b0111, size=4)

    """

    arity = [2, 0]
    is_symmetric = True
    infix_symbol = "|"

    @classmethod
    def eval(cls, x, y):
        for i, byte in enumerate(y._data):
            x._data[i] |= byte


# noinspection PyProtectedMember
class BvXor(Operation):
    """Bitwise XOR (exclusive-or) operation.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvXor
        >>> BvXor(BitVector(4, 0b0011), BitVector(4, 0b0101))
        BitVector(0b0110, size=4)
        >>> BitVector(4, 0b0011) ^ BitVector(4, 0b0101)
        BitVector(0b0110, size=4)

    """

    arity = [2, 0]
    is_symmetric = True
    infix_symbol = "^"

    @classmethod
    def eval(cls, x, y):
        for i, byte in enumerate(y._data):
            x._data[i] ^= byte


# Shifts

# noinspection PyProtectedMember
class BvShift(Operation):
    """Base class of the logical shifts.

    The scalar operand is the number of positions, a non-negative int.
    Vacated positions are filled with zeros, and shifting by the size
    of the bit-vector or more clears it.

    .. Implementation details:

        The bytes are moved in blocks of ``n // 8`` bytes and then
        realigned by ``n % 8`` bits, which gives the same result as moving
        the bits one at a time. The right shift relies on the padding
        bits being zero.

    """

    arity = [1, 1]
    is_symmetric = False

    @classmethod
    def _parse_args(cls, *args):
        args = super()._parse_args(*args)
        n = args[1]
        if not isinstance(n, int):
            msg = "shift amount must be an int, not '{}'"
            raise TypeError(msg.format(type(n).__name__))
        if n < 0:
            raise core.InvalidArgumentError("shift amount cannot be negative")
        return args

    @classmethod
    def eval(cls, x, n):
        if n >= x.size():
            x.reset()
        elif n > 0:
            x._data[:] = cls._shift_bytes(x._data, *divmod(n, 8))
            x._normalize()

    @classmethod
    def _shift_bytes(cls, data, offset, bits):
        """Return *data* shifted by *offset* bytes and *bits* bits."""
        raise NotImplementedError("subclasses need to override this method")


class BvShl(BvShift):
    """Shift left operation (towards the most significant bit).

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvShl
        >>> BvShl(BitVector(4, 0b0011), 1)
        BitVector(0b0110, size=4)
        >>> BitVector(4, 0b0011) << 3
        BitVector(0b1000, size=4)
        >>> BitVector(4, 0b0011) << 4
        BitVector(0b0000, size=4)

    """

    infix_symbol = "<<"

    @classmethod
    def _shift_bytes(cls, data, offset, bits):
        result = bytearray(len(data))
        for i in range(offset, len(data)):
            byte = (data[i - offset] << bits) & 0xff
            if i - offset > 0:
                byte |= data[i - offset - 1] >> (8 - bits)
            result[i] = byte
        return result


class BvLshr(BvShift):
    """Logical right shift operation (towards the least significant bit).

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.operation import BvLshr
        >>> BvLshr(BitVector(4, 0b1100), 1)
        BitVector(0b0110, size=4)
        >>> BitVector(4, 0b1100) >> 3
        BitVector(0b0001, size=4)
        >>> BitVector(4, 0b1100) >> 4
        BitVector(0b0000, size=4)

    """

    infix_symbol = ">>"

    @classmethod
    def _shift_bytes(cls, data, offset, bits):
        result = bytearray(len(data))
        for i in range(len(data) - offset):
            byte = data[i + offset] >> bits
            if i + offset + 1 < len(data):
                byte |= (data[i + offset + 1] << (8 - bits)) & 0xff
            result[i] = byte
        return result
