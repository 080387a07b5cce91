U64_MASK = (1 << 64) - 1  # Low-64-bit mask.

def bit_length(x):  # Number of bits needed to represent u64 x (0 -> 0).
    if not 0 <= x <= U64_MASK:
        raise ValueError("expected u64 x")
    return x.bit_length()

def log2_ceil(x):  # ceil(log2(x)); x must be non-zero.
    if x == 0:
        raise ValueError("log2_ceil is undefined for 0")
    return bit_length(x) - (1 if x & (x - 1) == 0 else 0)

def u64_digits(e):  # Little-endian u64 digits of a non-negative int (0 -> []).
    if e < 0:
        raise ValueError("expected non-negative integer")
    return [(e >> (64 * i)) & U64_MASK for i in range((e.bit_length() + 63) // 64)]
