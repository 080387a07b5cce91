"""Conversions between Python ints and prime-field elements.

A field type is used through one of two capabilities:

- ``words``: ``F.from_u64_digits(digits)`` / ``fe.to_u64_digits()`` (four little-endian u64s)
- ``repr``: ``F.from_repr(bytes)`` / ``fe.to_repr()`` (32 canonical little-endian bytes)

Every function here reduces integers canonically modulo the field prime before
building an element, so both capabilities give the same result for any input.
Signed values use the balanced representative in ``(-p/2, p/2]``.
"""

from bits import u64_digits  # little-endian u64 digits of an int
from field import Fr, NUM_DIGITS, REPR_BYTES  # default field + raw representation sizes

WORDS = "words"  # field exposes u64 digits
REPR = "repr"  # field exposes a canonical byte encoding

_MODULUS_CACHE = {}  # field type -> prime

def backend_of(F):  # Pick the conversion capability a field type offers (words preferred).
    if callable(getattr(F, "from_u64_digits", None)) and callable(getattr(F, "to_u64_digits", None)):
        return WORDS
    if callable(getattr(F, "from_repr", None)) and callable(getattr(F, "to_repr", None)):
        return REPR
    raise TypeError(f"{F.__name__} exposes neither u64 digits nor a canonical repr")

def _fe_from_canonical(F, x):  # Build an element from x in [0, p) through F's capability.
    if backend_of(F) == WORDS:
        return F.from_u64_digits(u64_digits(x))
    fe = F.from_repr(x.to_bytes(REPR_BYTES, "little"))
    if fe is None:
        raise ValueError(f"{F.__name__} rejected canonical encoding")
    return fe

def fe_to_biguint(fe):  # Canonical unsigned value of a field element.
    if backend_of(type(fe)) == REPR:
        return int.from_bytes(fe.to_repr(), "little")
    return sum(d << (64 * i) for i, d in enumerate(fe.to_u64_digits()))

def modulus(field=Fr):  # Field prime, computed as fe_to_biguint(-1) + 1 and memoized per type.
    p = _MODULUS_CACHE.get(field)
    if p is None:
        p = fe_to_biguint(-field.one()) + 1
        _MODULUS_CACHE[field] = p
    return p

def biguint_to_fe(e, field=Fr):  # Embed a non-negative int, reducing modulo the prime.
    if e < 0:
        raise ValueError("expected non-negative integer")
    return _fe_from_canonical(field, e % modulus(field))

def bigint_to_fe(e, field=Fr):  # Embed a signed int: magnitude, then field negation if negative.
    f_abs = biguint_to_fe(abs(e), field)
    return -f_abs if e < 0 else f_abs

def fe_to_bigint(fe):  # Balanced signed value: values above p/2 map to value - p.
    p = modulus(type(fe))
    e = fe_to_biguint(fe)
    return e if e <= p // 2 else e - p

def power_of_two(n, field=Fr):  # 2^n as a field element.
    return biguint_to_fe(1 << n, field)

def from_u64_digits(digits, field=Fr):  # Field element from at most four little-endian u64 digits.
    digits = list(digits)
    if len(digits) > NUM_DIGITS:
        raise ValueError(f"expected at most {NUM_DIGITS} u64 digits")
    if backend_of(field) == WORDS:
        return field.from_u64_digits(digits)
    return biguint_to_fe(sum(d << (64 * i) for i, d in enumerate(digits)), field)
