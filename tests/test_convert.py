import pathlib
import random
import sys
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from convert import (
    REPR,
    WORDS,
    backend_of,
    bigint_to_fe,
    biguint_to_fe,
    fe_to_bigint,
    fe_to_biguint,
    from_u64_digits,
    modulus,
    power_of_two,
)
from field import Fq, Fr


class ReprFr(Fr):  # Fr restricted to the canonical-bytes capability.
    from_u64_digits = None
    to_u64_digits = None


class ConvertTests(unittest.TestCase):
    def test_backend_selection(self):
        self.assertEqual(backend_of(Fr), WORDS)
        self.assertEqual(backend_of(ReprFr), REPR)
        with self.assertRaises(TypeError):
            backend_of(int)

    def test_modulus(self):
        self.assertEqual(modulus(), Fr.MODULUS)
        self.assertEqual(modulus(Fq), Fq.MODULUS)
        self.assertEqual(modulus(ReprFr), Fr.MODULUS)

    def test_signed_roundtrip(self):
        self.assertEqual(fe_to_bigint(bigint_to_fe(-1)), -1)
        rng = random.Random(0)
        half = Fr.MODULUS // 2
        for field in (Fr, ReprFr):
            for _ in range(64):
                e = rng.randrange(-half, half + 1)
                self.assertEqual(fe_to_bigint(bigint_to_fe(e, field)), e)

    def test_sign_threshold(self):
        p = Fr.MODULUS
        self.assertEqual(fe_to_bigint(Fr(p - 1)), -1)
        self.assertEqual(fe_to_bigint(Fr((p - 1) // 2)), (p - 1) // 2)
        self.assertEqual(fe_to_bigint(Fr((p + 1) // 2)), (p + 1) // 2 - p)
        self.assertEqual(fe_to_bigint(Fr.zero()), 0)

    def test_unsigned_roundtrip_on_both_backends(self):
        rng = random.Random(1)
        for field in (Fr, ReprFr, Fq):
            for _ in range(64):
                x = rng.randrange(0, field.MODULUS)
                fe = biguint_to_fe(x, field)
                self.assertIsInstance(fe, field)
                self.assertEqual(fe_to_biguint(fe), x)

    def test_embedding_reduces_modulo_prime(self):
        p = Fr.MODULUS
        for field in (Fr, ReprFr):
            self.assertEqual(fe_to_biguint(biguint_to_fe(p, field)), 0)
            self.assertEqual(fe_to_biguint(biguint_to_fe(p + 5, field)), 5)
            self.assertEqual(fe_to_biguint(biguint_to_fe(1 << 300, field)), pow(2, 300, p))
            self.assertEqual(fe_to_biguint(bigint_to_fe(-(p + 2), field)), p - 2)
        with self.assertRaises(ValueError):
            biguint_to_fe(-1)

    def test_power_of_two(self):
        self.assertEqual(power_of_two(0), Fr.one())
        self.assertEqual(int(power_of_two(200)), 1 << 200)
        self.assertEqual(int(power_of_two(256)), pow(2, 256, Fr.MODULUS))
        self.assertEqual(power_of_two(64) * power_of_two(64), power_of_two(128))

    def test_from_u64_digits(self):
        for field in (Fr, ReprFr):
            self.assertEqual(int(from_u64_digits([1, 2], field)), (2 << 64) | 1)
            self.assertEqual(int(from_u64_digits([], field)), 0)
            with self.assertRaises(ValueError):
                from_u64_digits([0] * 5, field)


if __name__ == "__main__":
    unittest.main()
