import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ristrettox.scalar import L, Scalar

X = Scalar.from_bits(bytes([
    0x4e, 0x5a, 0xb4, 0x34, 0x5d, 0x47, 0x08, 0x84,
    0x59, 0x13, 0xb4, 0x64, 0x1b, 0xc2, 0x7d, 0x52,
    0x52, 0xa5, 0x85, 0x10, 0x1b, 0xcc, 0x42, 0x44,
    0xd4, 0x49, 0xf4, 0xa8, 0x79, 0xd9, 0xf2, 0x04,
]))
XINV = Scalar.from_bits(bytes([
    0x1c, 0xdc, 0x17, 0xfc, 0xe0, 0xe9, 0xa5, 0xbb,
    0xd9, 0x24, 0x7e, 0x56, 0xbb, 0x01, 0x63, 0x47,
    0xbb, 0xba, 0x31, 0xed, 0xd5, 0xa9, 0xbb, 0x96,
    0xd5, 0x0b, 0xcd, 0x7a, 0x3f, 0x96, 0x2a, 0x0f,
]))
Y = Scalar.from_bits(bytes([
    0x90, 0x76, 0x33, 0xfe, 0x1c, 0x4b, 0x66, 0xa4,
    0xa2, 0x8d, 0x2d, 0xd7, 0x67, 0x83, 0x86, 0xc3,
    0x53, 0xd0, 0xde, 0x54, 0x55, 0xd4, 0xfc, 0x9d,
    0xe8, 0xef, 0x7a, 0xc3, 0x1f, 0x35, 0xbb, 0x05,
]))
X_TIMES_Y = Scalar.from_bits(bytes([
    0x6c, 0x33, 0x74, 0xa1, 0x89, 0x4f, 0x62, 0x21,
    0x0a, 0xaa, 0x2f, 0xe1, 0x86, 0xa6, 0xf9, 0x2c,
    0xe0, 0xaa, 0x75, 0xc2, 0x77, 0x95, 0x81, 0xc2,
    0x95, 0xfc, 0x08, 0x17, 0x9a, 0x73, 0x94, 0x0c,
]))
CANONICAL_2_256_MINUS_1 = Scalar.from_bits(bytes([
    28, 149, 152, 141, 116, 49, 236, 214,
    112, 207, 125, 115, 244, 91, 239, 198,
    254, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 15,
]))
LARGEST_ED25519_S = Scalar.from_bits(bytes([0xf8] + [0xff] * 30 + [0x7f]))
CANONICAL_LARGEST_ED25519_S_PLUS_ONE = Scalar.from_bits(bytes([
    0x7e, 0x34, 0x47, 0x75, 0x47, 0x4a, 0x7f, 0x97,
    0x23, 0xb6, 0x3a, 0x8b, 0xe9, 0x2a, 0xe7, 0x6d,
] + [0xff] * 15 + [0x0f]))
CANONICAL_LARGEST_ED25519_S_MINUS_ONE = Scalar.from_bits(bytes([
    0x7c, 0x34, 0x47, 0x75, 0x47, 0x4a, 0x7f, 0x97,
    0x23, 0xb6, 0x3a, 0x8b, 0xe9, 0x2a, 0xe7, 0x6d,
] + [0xff] * 15 + [0x0f]))
L_PLUS_TWO_BYTES = bytes([
    0xef, 0xd3, 0xf5, 0x5c, 0x1a, 0x63, 0x12, 0x58,
    0xd6, 0x9c, 0xf7, 0xa2, 0xde, 0xf9, 0xde, 0x14,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10,
])
WIDE_REDUCED = bytes([
    216, 154, 179, 139, 210, 121, 2, 71,
    69, 99, 158, 216, 23, 173, 63, 100,
    204, 0, 91, 50, 219, 153, 57, 249,
    28, 82, 31, 197, 100, 165, 192, 8,
])


def test_fuzzer_testcase_reduction():
    a_bytes = bytes([255] * 23 + [0] * 9)
    b_bytes = bytes([0] * 23 + [255, 210, 210, 210, 255, 255, 255, 255, 10])
    c_bytes = bytes([134, 171, 119, 216, 180, 128, 178, 62, 171, 132, 32, 62, 34, 119, 104, 193,
                     47, 215, 181, 250, 14, 207, 172, 93, 75, 207, 211, 103, 144, 204, 56, 14])
    a = Scalar.from_bytes_mod_order(a_bytes)
    b = Scalar.from_bytes_mod_order(b_bytes)
    c = Scalar.from_bytes_mod_order(c_bytes)
    also_a = Scalar.from_bytes_mod_order_wide(a_bytes + bytes(32))
    also_b = Scalar.from_bytes_mod_order_wide(b_bytes + bytes(32))
    assert c == a * b
    assert c == also_a * also_b


def test_from_u64():
    s = Scalar.from_int(0xDEADBEEFDEADBEEF)
    assert [s[i] for i in range(8)] == [0xef, 0xbe, 0xad, 0xde, 0xef, 0xbe, 0xad, 0xde]


def test_from_int_rejects_out_of_range():
    with pytest.raises(ValueError):
        Scalar.from_int(-1)
    with pytest.raises(ValueError):
        Scalar.from_int(1 << 128)


def test_scalar_mul_by_one():
    assert (X * Scalar.one()).to_bytes() == X.to_bytes()


def test_add_reduces():
    assert (LARGEST_ED25519_S + Scalar.one()).reduce() == CANONICAL_LARGEST_ED25519_S_PLUS_ONE
    assert LARGEST_ED25519_S + Scalar.one() == CANONICAL_LARGEST_ED25519_S_PLUS_ONE


def test_sub_reduces():
    assert (LARGEST_ED25519_S - Scalar.one()).reduce() == CANONICAL_LARGEST_ED25519_S_MINUS_ONE
    assert LARGEST_ED25519_S - Scalar.one() == CANONICAL_LARGEST_ED25519_S_MINUS_ONE


def test_quarkslab_scalar_overflow_does_not_occur():
    large_bytes = bytes([0xff] * 31 + [0x7f])
    a = Scalar.from_bytes_mod_order(large_bytes)
    b = Scalar.from_bits(large_bytes)
    assert a == b.reduce()
    a_3 = a + a + a
    b_3 = b + b + b
    assert a_3 == b_3
    assert -a == -b
    minus_a_3 = Scalar.zero() - a - a - a
    minus_b_3 = Scalar.zero() - b - b - b
    assert minus_a_3 == minus_b_3
    assert minus_a_3 == -a_3
    assert minus_b_3 == -b_3


def test_impl_add():
    assert Scalar.one() + Scalar.one() == Scalar.from_int(2)


def test_impl_mul():
    assert X * Y == X_TIMES_Y


def test_square():
    assert X * X == Scalar(pow(X.value, 2, L))


def test_reduce():
    assert Scalar.from_bytes_mod_order(bytes([0xff] * 32)) == CANONICAL_2_256_MINUS_1


def test_from_bytes_mod_order_wide():
    reduced = Scalar.from_bytes_mod_order_wide(X.to_bytes() + X.to_bytes())
    assert reduced.to_bytes() == WIDE_REDUCED


def test_invert():
    inv_x = X.invert()
    assert inv_x == XINV
    assert inv_x * X == Scalar.one()


def test_neg_twice_is_identity():
    assert -(-X) == X


def test_canonical_decoding():
    canonical_bytes = bytes([99, 99, 99, 99] + [0] * 28)
    unreduced = bytes([16] * 32)
    highbit = bytes([0] * 31 + [128])
    assert Scalar.from_canonical_bytes(canonical_bytes) == Scalar.from_int(1667457891)
    assert Scalar.from_canonical_bytes(unreduced) is None
    assert Scalar.from_canonical_bytes(highbit) is None


def test_canonical_bytes_of_one_accepted_and_l_plus_two_rejected():
    assert Scalar.from_canonical_bytes(Scalar.one().to_bytes()) == Scalar.one()
    assert Scalar.from_canonical_bytes(L_PLUS_TWO_BYTES) is None


def test_l_plus_two_reduces_to_two():
    two = Scalar.one() + Scalar.one()
    assert Scalar.from_bytes_mod_order(L_PLUS_TWO_BYTES) == two
    unreduced = Scalar.from_bits(L_PLUS_TWO_BYTES)
    assert unreduced != two
    assert not unreduced.is_canonical()
    assert unreduced.reduce() == two


def test_from_bits_masks_high_bit_and_reduce_is_canonical():
    big = Scalar.from_bits(bytes([0xff] * 32))
    assert big.value == 2**255 - 1
    assert not big.is_canonical()
    assert big.reduce().is_canonical()


def test_zero_bytes():
    assert Scalar.zero().to_bytes() == bytes(32)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Scalar.from_bytes_mod_order(bytes(31))
    with pytest.raises(ValueError):
        Scalar.from_bytes_mod_order_wide(bytes(32))


def test_bits():
    bits = Scalar.from_int(5).bits()
    assert len(bits) == 256
    assert bits[:4] == [1, 0, 1, 0]
    assert sum(bits) == 2


def test_conditional_select():
    assert Scalar.conditional_select(X, Y, False) == X
    assert Scalar.conditional_select(X, Y, True) == Y


@settings(deadline=None)
@given(st.binary(min_size=64, max_size=64), st.binary(min_size=64, max_size=64))
def test_sub_undoes_add(a_bytes, b_bytes):
    a = Scalar.from_bytes_mod_order_wide(a_bytes)
    b = Scalar.from_bytes_mod_order_wide(b_bytes)
    assert a.is_canonical()
    assert (a + b) - b == a
    assert a + (-a) == Scalar.zero()