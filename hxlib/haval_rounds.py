"""HAVAL compression function and output tailoring on 32-bit words."""

from __future__ import annotations

from collections.abc import Sequence

MASK = 0xFFFFFFFF

INITIAL_FINGERPRINT = (
    0x243F6A88,
    0x85A308D3,
    0x13198A2E,
    0x03707344,
    0xA4093822,
    0x299F31D0,
    0x082EFA98,
    0xEC4E6C89,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & MASK


def _f1(x6, x5, x4, x3, x2, x1, x0):
    return (x1 & (x0 ^ x4)) ^ (x2 & x5) ^ (x3 & x6) ^ x0


def _f2(x6, x5, x4, x3, x2, x1, x0):
    return (
        (x2 & ((x1 & ~x3) ^ (x4 & x5) ^ x6 ^ x0))
        ^ (x4 & (x1 ^ x5))
        ^ (x3 & x5)
        ^ x0
    )


def _f3(x6, x5, x4, x3, x2, x1, x0):
    return (x3 & ((x1 & x2) ^ x6 ^ x0)) ^ (x1 & x4) ^ (x2 & x5) ^ x0


def _f4(x6, x5, x4, x3, x2, x1, x0):
    return (
        (x4 & ((x5 & ~x2) ^ (x3 & ~x6) ^ x1 ^ x6 ^ x0))
        ^ (x3 & ((x1 & x2) ^ x5 ^ x6))
        ^ (x2 & x6)
        ^ x0
    )


def _f5(x6, x5, x4, x3, x2, x1, x0):
    return (x0 & ((x1 & x2 & x3) ^ ~x5)) ^ (x1 & x4) ^ (x2 & x5) ^ (x3 & x6)


# Each permutation names, for the formal arguments x6..x0 of the boolean
# function, which of the actual words x0..x7 is passed in that place.
_PASS1 = (
    _f1,
    {3: (1, 0, 3, 5, 6, 2, 4), 4: (2, 6, 1, 4, 5, 3, 0), 5: (3, 4, 1, 0, 5, 2, 6)},
    tuple(range(32)),
    (0,) * 32,
)

_PASS2 = (
    _f2,
    {3: (4, 2, 1, 0, 5, 3, 6), 4: (3, 5, 2, 0, 1, 6, 4), 5: (6, 2, 1, 0, 3, 4, 5)},
    (5, 14, 26, 18, 11, 28, 7, 16, 0, 23, 20, 22, 1, 10, 4, 8,
     30, 3, 21, 9, 17, 24, 29, 6, 19, 12, 15, 13, 2, 25, 31, 27),
    (0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
     0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
     0x9216D5D9, 0x8979FB1B, 0xD1310BA6, 0x98DFB5AC,
     0x2FFD72DB, 0xD01ADFB7, 0xB8E1AFED, 0x6A267E96,
     0xBA7C9045, 0xF12C7F99, 0x24A19947, 0xB3916CF7,
     0x0801F2E2, 0x858EFC16, 0x636920D8, 0x71574E69,
     0xA458FEA3, 0xF4933D7E, 0x0D95748F, 0x728EB658,
     0x718BCD58, 0x82154AEE, 0x7B54A41D, 0xC25A59B5),
)

_PASS3 = (
    _f3,
    {3: (6, 1, 2, 3, 4, 5, 0), 4: (1, 4, 3, 6, 0, 2, 5), 5: (2, 6, 0, 4, 3, 1, 5)},
    (19, 9, 4, 20, 28, 17, 8, 22, 29, 14, 25, 12, 24, 30, 16, 26,
     31, 15, 7, 3, 1, 0, 18, 27, 13, 6, 21, 10, 23, 11, 5, 2),
    (0x9C30D539, 0x2AF26013, 0xC5D1B023, 0x286085F0,
     0xCA417918, 0xB8DB38EF, 0x8E79DCB0, 0x603A180E,
     0x6C9E0E8B, 0xB01E8A3E, 0xD71577C1, 0xBD314B27,
     0x78AF2FDA, 0x55605C60, 0xE65525F3, 0xAA55AB94,
     0x57489862, 0x63E81440, 0x55CA396A, 0x2AAB10B6,
     0xB4CC5C34, 0x1141E8CE, 0xA15486AF, 0x7C72E993,
     0xB3EE1411, 0x636FBC2A, 0x2BA9C55D, 0x741831F6,
     0xCE5C3E16, 0x9B87931E, 0xAFD6BA33, 0x6C24CF5C),
)

_PASS4 = (
    _f4,
    {4: (6, 4, 0, 5, 2, 1, 3), 5: (1, 5, 3, 2, 0, 4, 6)},
    (24, 4, 0, 14, 2, 7, 28, 23, 26, 6, 30, 20, 18, 25, 19, 3,
     22, 11, 31, 21, 8, 27, 12, 9, 1, 29, 5, 15, 17, 10, 16, 13),
    (0x7A325381, 0x28958677, 0x3B8F4898, 0x6B4BB9AF,
     0xC4BFE81B, 0x66282193, 0x61D809CC, 0xFB21A991,
     0x487CAC60, 0x5DEC8032, 0xEF845D5D, 0xE98575B1,
     0xDC262302, 0xEB651B88, 0x23893E81, 0xD396ACC5,
     0x0F6D6FF3, 0x83F44239, 0x2E0B4482, 0xA4842004,
     0x69C8F04A, 0x9E1F9B5E, 0x21C66842, 0xF6E96C9A,
     0x670C9C61, 0xABD388F0, 0x6A51A0D2, 0xD8542F68,
     0x960FA728, 0xAB5133A3, 0x6EEF0B6C, 0x137A3BE4),
)

_PASS5 = (
    _f5,
    {5: (2, 5, 0, 6, 4, 3, 1)},
    (27, 3, 21, 26, 17, 11, 20, 29, 19, 0, 12, 7, 13, 8, 31, 10,
     5, 9, 14, 30, 18, 6, 28, 24, 2, 23, 16, 22, 4, 1, 25, 15),
    (0xBA3BF050, 0x7EFB2A98, 0xA1F1651D, 0x39AF0176,
     0x66CA593E, 0x82430E88, 0x8CEE8619, 0x456F9FB4,
     0x7D84A5C3, 0x3B8B5EBE, 0xE06F75D8, 0x85C12073,
     0x401A449F, 0x56C16AA6, 0x4ED3AA62, 0x363F7706,
     0x1BFEDF72, 0x429B023D, 0x37D0D724, 0xD00A1248,
     0xDB0FEAD3, 0x49F1C09B, 0x075372C9, 0x80991B7B,
     0x25D479D8, 0xF6E8DEF7, 0xE3FE501A, 0xB6794C3B,
     0x976CE0BD, 0x04C006BA, 0xC1A94FB6, 0x409F60C4),
)


def _passes_for(passes: int):
    yield _PASS1
    yield _PASS2
    yield _PASS3
    if passes >= 4:
        yield _PASS4
    if passes == 5:
        yield _PASS5


def hash_block(fingerprint: Sequence[int], block: Sequence[int], passes: int) -> list[int]:
    """Run one 32-word block through the HAVAL rounds and return the new fingerprint."""
    if len(fingerprint) != 8:
        raise ValueError("fingerprint must hold 8 words")
    if len(block) != 32:
        raise ValueError("block must hold 32 words")
    words = [w & MASK for w in block]
    start = [f & MASK for f in fingerprint]
    t = list(start)

    for func, perms, order, constants in _passes_for(passes):
        perm = perms.get(passes, perms[5])
        for step, (w_index, constant) in enumerate(zip(order, constants)):
            target = 7 - step % 8
            x = [t[(target - 7 + k) % 8] for k in range(8)]
            temp = func(*(x[p] for p in perm)) & MASK
            t[target] = (
                _rotr(temp, 7) + _rotr(t[target], 11) + words[w_index] + constant
            ) & MASK

    return [(a + b) & MASK for a, b in zip(start, t)]


def tailor(fingerprint: Sequence[int], fptlen: int) -> list[int]:
    """Fold the 256-bit state down to the requested fingerprint length."""
    if len(fingerprint) != 8:
        raise ValueError("fingerprint must hold 8 words")
    f = [v & MASK for v in fingerprint]
    f4, f5, f6, f7 = f[4], f[5], f[6], f[7]

    if fptlen == 128:
        temp = (f7 & 0x000000FF) | (f6 & 0xFF000000) | (f5 & 0x00FF0000) | (f4 & 0x0000FF00)
        f[0] += _rotr(temp, 8)
        temp = (f7 & 0x0000FF00) | (f6 & 0x000000FF) | (f5 & 0xFF000000) | (f4 & 0x00FF0000)
        f[1] += _rotr(temp, 16)
        temp = (f7 & 0x00FF0000) | (f6 & 0x0000FF00) | (f5 & 0x000000FF) | (f4 & 0xFF000000)
        f[2] += _rotr(temp, 24)
        temp = (f7 & 0xFF000000) | (f6 & 0x00FF0000) | (f5 & 0x0000FF00) | (f4 & 0x000000FF)
        f[3] += temp
    elif fptlen == 160:
        temp = (f7 & 0x3F) | (f6 & (0x7F << 25)) | (f5 & (0x3F << 19))
        f[0] += _rotr(temp, 19)
        temp = (f7 & (0x3F << 6)) | (f6 & 0x3F) | (f5 & (0x7F << 25))
        f[1] += _rotr(temp, 25)
        temp = (f7 & (0x7F << 12)) | (f6 & (0x3F << 6)) | (f5 & 0x3F)
        f[2] += temp
        temp = (f7 & (0x3F << 19)) | (f6 & (0x7F << 12)) | (f5 & (0x3F << 6))
        f[3] += temp >> 6
        temp = (f7 & (0x7F << 25)) | (f6 & (0x3F << 19)) | (f5 & (0x7F << 12))
        f[4] += temp >> 12
    elif fptlen == 192:
        temp = (f7 & 0x1F) | (f6 & (0x3F << 26))
        f[0] += _rotr(temp, 26)
        temp = (f7 & (0x1F << 5)) | (f6 & 0x1F)
        f[1] += temp
        temp = (f7 & (0x3F << 10)) | (f6 & (0x1F << 5))
        f[2] += temp >> 5
        temp = (f7 & (0x1F << 16)) | (f6 & (0x3F << 10))
        f[3] += temp >> 10
        temp = (f7 & (0x1F << 21)) | (f6 & (0x1F << 16))
        f[4] += temp >> 16
        temp = (f7 & (0x3F << 26)) | (f6 & (0x1F << 21))
        f[5] += temp >> 21
    elif fptlen == 224:
        f[0] += (f7 >> 27) & 0x1F
        f[1] += (f7 >> 22) & 0x1F
        f[2] += (f7 >> 18) & 0x0F
        f[3] += (f7 >> 13) & 0x1F
        f[4] += (f7 >> 9) & 0x0F
        f[5] += (f7 >> 4) & 0x1F
        f[6] += f7 & 0x0F

    return [v & MASK for v in f]