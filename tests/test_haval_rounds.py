import struct

import pytest

from hxlib.haval_rounds import INITIAL_FINGERPRINT, hash_block, tailor


def _empty_message_block(fptlen, passes):
    block = bytearray(128)
    block[0] = 0x01
    block[118] = ((fptlen & 0x3) << 6) | ((passes & 0x7) << 3) | 1
    block[119] = (fptlen >> 2) & 0xFF
    return list(struct.unpack("<32I", bytes(block)))


def _digest(fptlen, passes):
    state = hash_block(INITIAL_FINGERPRINT, _empty_message_block(fptlen, passes), passes)
    state = tailor(state, fptlen)
    return struct.pack(f"<{fptlen // 32}I", *state[: fptlen // 32]).hex()


def test_empty_message_128_3():
    assert _digest(128, 3) == "c68f39913f901f3ddf44c707357a7d70"


def test_empty_message_256_5():
    assert _digest(256, 5) == (
        "be417bb4dd5cfb76c7126f4f8eeb1553a449039307b1a3cd451dbfdc0fbbe330"
    )


def test_hash_block_returns_eight_32bit_words():
    result = hash_block(INITIAL_FINGERPRINT, list(range(32)), 4)
    assert len(result) == 8
    assert all(0 <= w <= 0xFFFFFFFF for w in result)


def test_hash_block_is_deterministic_and_pure():
    start = list(INITIAL_FINGERPRINT)
    block = [i * 0x01010101 for i in range(32)]
    first = hash_block(start, block, 5)
    second = hash_block(start, block, 5)
    assert first == second
    assert start == list(INITIAL_FINGERPRINT)


@pytest.mark.parametrize("a,b", [(3, 4), (4, 5), (3, 5)])
def test_pass_count_changes_result(a, b):
    block = list(range(32))
    assert hash_block(INITIAL_FINGERPRINT, block, a) != hash_block(INITIAL_FINGERPRINT, block, b)


def test_block_content_changes_result():
    block = [0] * 32
    other = [0] * 31 + [1]
    assert hash_block(INITIAL_FINGERPRINT, block, 3) != hash_block(INITIAL_FINGERPRINT, other, 3)


def test_wrong_block_length_rejected():
    with pytest.raises(ValueError):
        hash_block(INITIAL_FINGERPRINT, [0] * 31, 3)


def test_wrong_fingerprint_length_rejected():
    with pytest.raises(ValueError):
        hash_block([0] * 7, [0] * 32, 3)
    with pytest.raises(ValueError):
        tailor([0] * 9, 128)


def test_tailor_256_is_identity():
    state = hash_block(INITIAL_FINGERPRINT, list(range(32)), 3)
    assert tailor(state, 256) == state


@pytest.mark.parametrize("fptlen,untouched", [(128, 4), (160, 5), (192, 6), (224, 7)])
def test_tailor_keeps_high_words(fptlen, untouched):
    state = hash_block(INITIAL_FINGERPRINT, list(range(32)), 5)
    folded = tailor(state, fptlen)
    assert folded[untouched:] == state[untouched:]
    assert len(folded) == 8


@pytest.mark.parametrize("fptlen", [128, 160, 192, 224, 256])
def test_tailor_of_zero_state_is_zero(fptlen):
    assert tailor([0] * 8, fptlen) == [0] * 8


def test_tailor_224_adds_masked_fields():
    folded = tailor([0] * 7 + [0xFFFFFFFF], 224)
    assert folded == [0x1F, 0x1F, 0x0F, 0x1F, 0x0F, 0x1F, 0x0F, 0xFFFFFFFF]