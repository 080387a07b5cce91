NUM_DIGITS = 4  # 64-bit words in a field element's raw representation.
REPR_BYTES = 32  # bytes in a field element's canonical little-endian encoding.
U64_MASK = (1 << 64) - 1  # Low-64-bit mask.

class MontgomeryField:  # Prime field element stored as a Montgomery residue.
    R = 1 << 256  # Montgomery radix.
    MASK = R - 1  # Low-256-bit mask.

    def __init_subclass__(cls):  # Derive Montgomery constants once per concrete field.
        if "MODULUS" not in cls.__dict__:
            return
        p = cls.MODULUS
        if p % 2 == 0 or p >= cls.R:
            raise ValueError("MODULUS must be odd and < 2^256")
        cls.NP = (-pow(p, -1, cls.R)) & cls.MASK
        cls.R1 = cls.R % p
        cls.R2 = (cls.R1 * cls.R1) % p
        cls.NUM_BITS = p.bit_length()

    def __init__(self, x=0, mont=False):  # Build from an int (reduced mod MODULUS) or a raw residue.
        cls = type(self)
        self.v = x % cls.MODULUS if mont else cls._red((x % cls.MODULUS) * cls.R2)

    @classmethod
    def _red(cls, t):  # t * R^-1 mod MODULUS.
        m = ((t & cls.MASK) * cls.NP) & cls.MASK
        u = (t + m * cls.MODULUS) >> 256
        return u - cls.MODULUS if u >= cls.MODULUS else u

    zero = classmethod(lambda cls: cls(0, mont=True))  # Additive identity.

    one = classmethod(lambda cls: cls(cls.R1, mont=True))  # Multiplicative identity.

    @classmethod
    def from_u64(cls, x):  # Field element from a u64 (Rust `F::from(u64)`).
        if not 0 <= x <= U64_MASK:
            raise ValueError("value does not fit in u64")
        return cls(x)

    @classmethod
    def from_u128(cls, x):  # Field element from a u128.
        if not 0 <= x < 1 << 128:
            raise ValueError("value does not fit in u128")
        return cls(x)

    # Word backend: four little-endian u64 digits of the canonical value.

    @classmethod
    def from_u64_digits(cls, digits):  # Pad to four words; non-canonical values are reduced.
        digits = list(digits)
        if len(digits) > NUM_DIGITS:
            raise ValueError(f"expected at most {NUM_DIGITS} u64 digits")
        x = 0
        for i, d in enumerate(digits):
            if not 0 <= d <= U64_MASK:
                raise ValueError("digit does not fit in u64")
            x |= d << (64 * i)
        return cls(x)

    def to_u64_digits(self):
        x = self.to_int()
        return [(x >> (64 * i)) & U64_MASK for i in range(NUM_DIGITS)]

    # Repr backend: 32-byte canonical little-endian encoding.

    @classmethod
    def from_repr(cls, repr_bytes):  # None unless the encoding is canonical (Rust `CtOption`).
        repr_bytes = bytes(repr_bytes)
        if len(repr_bytes) != REPR_BYTES:
            return None
        x = int.from_bytes(repr_bytes, "little")
        return cls(x) if x < cls.MODULUS else None

    def to_repr(self):
        return self.to_int().to_bytes(REPR_BYTES, "little")

    def to_int(self): return type(self)._red(self.v)  # Canonical integer in [0, MODULUS).

    def _c(self, other):  # Coerce int/same-type operand into a field element.
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, int):
            return cls(other)
        raise TypeError(f"expected {cls.__name__} or int")

    def __add__(self, other):
        v = self.v + self._c(other).v
        p = type(self).MODULUS
        return type(self)(v - p if v >= p else v, mont=True)

    __radd__ = __add__

    def __sub__(self, other):
        v = self.v - self._c(other).v
        return type(self)(v + type(self).MODULUS if v < 0 else v, mont=True)

    def __mul__(self, other):
        return type(self)(type(self)._red(self.v * self._c(other).v), mont=True)

    __rmul__ = __mul__

    def __neg__(self):  # Field negation: MODULUS - x, with -0 == 0.
        return self if self.v == 0 else type(self)(type(self).MODULUS - self.v, mont=True)

    def __eq__(self, other):  # Equality with field elements or ints (compared mod MODULUS).
        if isinstance(other, type(self)):
            return self.v == other.v
        return self.to_int() == (other % type(self).MODULUS) if isinstance(other, int) else False

    def __hash__(self): return hash((type(self).__name__, self.v))

    def __int__(self): return self.to_int()

    def __repr__(self): return f"{type(self).__name__}({self.to_int()})"

class Fq(MontgomeryField):  # BN254 base field.
    MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583  # BN254 Fq modulus

class Fr(MontgomeryField):  # BN254 scalar field.
    MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617  # BN254 Fr modulus
