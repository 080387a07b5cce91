from field import Fr  # default field
from limbs import decompose_bigint  # signed limb decomposition

_UNKNOWN = object()  # marker for a value not available outside witness generation

class Value:  # Circuit-assignment value: known during witness generation, unknown otherwise.
    def __init__(self, inner=_UNKNOWN):
        self._inner = inner

    known = classmethod(lambda cls, inner: cls(inner))  # Wrap a concrete value.

    unknown = classmethod(lambda cls: cls())  # Value with no witness.

    def is_known(self): return self._inner is not _UNKNOWN

    def map(self, f):  # Apply f to a known value; unknown stays unknown.
        return type(self)(f(self._inner)) if self.is_known() else type(self)()

    def transpose_vec(self, length):  # Value[list] -> list[Value] of the given length.
        if not self.is_known():
            return [type(self)() for _ in range(length)]
        items = list(self._inner)
        if len(items) != length:
            raise ValueError(f"expected {length} items, got {len(items)}")
        return [type(self)(x) for x in items]

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        if self.is_known() != other.is_known():
            return False
        return not self.is_known() or self._inner == other._inner

    def __repr__(self):
        return f"Value({self._inner!r})" if self.is_known() else "Value(unknown)"

def decompose_bigint_option(value, number_of_limbs, bit_len, field=Fr):  # Value[int] -> list of Value[field limb] (bit_len < 128).
    return value.map(lambda e: decompose_bigint(e, number_of_limbs, bit_len, field)).transpose_vec(number_of_limbs)

def value_to_option(value):  # Contained value, or None when unknown.
    return value._inner if value.is_known() else None
