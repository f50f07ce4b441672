"""Manage the representation of bit-vectors."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `BitVector`.

    The bits are printed from the most significant one (index ``size - 1``)
    down to index 0.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.printing import BvStrPrinter
        >>> BvStrPrinter().doprint(BitVector(6, 0b100110))
        '100110'
        >>> BvStrPrinter().doprint(BitVector())
        ''

    """

    def _print_BitVector(self, bv):
        storage = bv.storage
        return "".join(
            "1" if (storage[i // 8] >> (i % 8)) & 1 else "0"
            for i in reversed(range(bv.size())))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `BitVector.vrepr` method.

        >>> from dynbits.bitvector.core import BitVector
        >>> from dynbits.bitvector.printing import BvReprPrinter
        >>> BvReprPrinter().doprint(BitVector(12, 3))
        'BitVector(0b000000000011, size=12)'
        >>> BvReprPrinter().doprint(BitVector())
        'BitVector(size=0)'

    """

    def _print_BitVector(self, bv):
        if bv.empty():
            return "{}(size={})".format(type(bv).__name__, bv.size())
        bits = BvStrPrinter().doprint(bv)
        return "{}(0b{}, size={})".format(type(bv).__name__, bits, bv.size())
