from bits import u64_digits  # little-endian u64 digits of an int
from convert import REPR, backend_of, fe_to_biguint  # field capability + canonical value
from field import Fr  # default field

def decompose_u64_digits_to_limbs(digits, number_of_limbs, bit_len):  # Slice u64 digits into bit_len-bit limbs (bit_len < 64).
    """Return ``number_of_limbs`` little-endian limbs of ``bit_len`` bits each.

    ``digits`` is any iterable of u64 words, least significant first; it is
    treated as zero-padded once exhausted. Bits above
    ``number_of_limbs * bit_len`` are dropped.
    """
    if not 0 <= bit_len < 64:
        raise ValueError("bit_len must be in [0, 64)")
    digits = iter(digits)
    mask = (1 << bit_len) - 1
    u64_digit = next(digits, 0)
    rem = 64  # unconsumed bits left in u64_digit
    limbs = []
    for _ in range(number_of_limbs):
        if rem > bit_len:
            limb = u64_digit & mask
            u64_digit >>= bit_len
            rem -= bit_len
        elif rem == bit_len:
            limb = u64_digit & mask
            u64_digit = next(digits, 0)
            rem = 64
        else:  # limb straddles two digits
            limb = u64_digit
            u64_digit = next(digits, 0)
            limb |= (u64_digit & ((1 << (bit_len - rem)) - 1)) << rem
            u64_digit >>= bit_len - rem
            rem += 64 - bit_len
        limbs.append(limb)
    return limbs

def decompose_fe_to_u64_limbs(e, number_of_limbs, bit_len):  # Limbs of a field element as ints (bit_len < 64).
    if backend_of(type(e)) == REPR:
        digits = u64_digits(fe_to_biguint(e))
    else:
        digits = e.to_u64_digits()
    return decompose_u64_digits_to_limbs(digits, number_of_limbs, bit_len)

def decompose_biguint(e, number_of_limbs, bit_len, field=Fr):  # Wide limbs (64 <= bit_len < 128) as field elements.
    """Split a non-negative int into ``number_of_limbs`` field limbs of ``bit_len`` bits.

    Each limb is accumulated as a u128 from two or three u64 digits and built
    with ``field.from_u128``. Bits above ``number_of_limbs * bit_len`` are dropped.
    """
    if not 64 <= bit_len < 128:
        raise ValueError("bit_len must be in [64, 128)")
    if e < 0:
        raise ValueError("expected non-negative integer")
    if number_of_limbs == 0:
        return []
    digits = iter(u64_digits(e))

    limb0 = next(digits, 0)
    rem = bit_len - 64  # bits of limb0 taken from the second digit
    u64_digit = next(digits, 0)
    limb0 |= (u64_digit & ((1 << rem) - 1)) << 64
    u64_digit >>= rem
    rem = 64 - rem  # bits left in u64_digit
    limbs = [field.from_u128(limb0)]

    for _ in range(1, number_of_limbs):
        limb = u64_digit
        bits = rem
        u64_digit = next(digits, 0)
        if bit_len >= 64 + bits:  # a whole digit fits in this limb
            limb |= u64_digit << bits
            u64_digit = next(digits, 0)
            bits += 64
        rem = bit_len - bits
        limb |= (u64_digit & ((1 << rem) - 1)) << bits
        u64_digit >>= rem
        rem = 64 - rem
        limbs.append(field.from_u128(limb))
    return limbs

def decompose_bigint(e, number_of_limbs, bit_len, field=Fr):  # Signed limbs: decompose |e|, negate each limb if e < 0.
    if bit_len < 64:
        digits = u64_digits(abs(e))
        limbs = [field.from_u64(x) for x in decompose_u64_digits_to_limbs(digits, number_of_limbs, bit_len)]
    else:
        limbs = decompose_biguint(abs(e), number_of_limbs, bit_len, field)
    return [-x for x in limbs] if e < 0 else limbs

def decompose(e, number_of_limbs, bit_len):  # Field element -> field limbs, same field type.
    F = type(e)
    if bit_len >= 64:
        return decompose_biguint(fe_to_biguint(e), number_of_limbs, bit_len, F)
    return [F.from_u64(x) for x in decompose_fe_to_u64_limbs(e, number_of_limbs, bit_len)]

def compose(limbs, bit_len):  # sum(limbs[i] * 2^(bit_len*i)); field limbs count by canonical value.
    acc = 0
    for limb in reversed(list(limbs)):
        acc = (acc << bit_len) + int(limb)
    return acc
