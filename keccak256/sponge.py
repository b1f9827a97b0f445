"""
Sponge construction for Keccak-256: rate 1088 bits, capacity 512 bits,
original (pre-NIST) multi-rate padding.
"""

from .permutation import H, W, LANE_BITS, keccak_f, new_state

BITRATE_BITS = 1088
CAPACITY_BITS = 512
OUTPUT_BITS = 256


def bits2bytes(x):
    return (x + 7) // 8


RATE_BYTES = bits2bytes(BITRATE_BITS)
CAPACITY_BYTES = bits2bytes(CAPACITY_BITS)
DIGEST_BYTES = bits2bytes(OUTPUT_BITS)
LANE_BYTES = LANE_BITS // 8

assert RATE_BYTES + CAPACITY_BYTES == W * H * LANE_BYTES
assert DIGEST_BYTES <= RATE_BYTES


def multirate_padding(used_bytes, align_bytes):
    """
    Keccak pad10*1 for byte-aligned messages: 0x01, zero bytes, then 0x80.

    The padding always adds at least one byte, so a message that already
    fills a block gets a whole extra block.
    """
    padlen = align_bytes - (used_bytes % align_bytes)
    if padlen == 1:
        return b"\x81"
    return b"\x01" + b"\x00" * (padlen - 2) + b"\x80"


# --------------------------------------------------------------------
#                          Keccak State & Sponge
# --------------------------------------------------------------------

class KeccakState:
    """The 1600-bit state plus its little-endian byte view, lane index x + 5*y."""

    def __init__(self):
        self.s = new_state()

    def absorb(self, block):
        assert len(block) == RATE_BYTES
        i = 0
        for y in range(H):
            for x in range(W):
                if i >= RATE_BYTES:
                    return
                self.s[x][y] ^= int.from_bytes(block[i : i + LANE_BYTES], "little")
                i += LANE_BYTES

    def get_bytes(self):
        out = bytearray()
        for y in range(H):
            for x in range(W):
                out += self.s[x][y].to_bytes(LANE_BYTES, "little")
        return bytes(out)

    def squeeze(self):
        return self.get_bytes()[:RATE_BYTES]


class KeccakSponge:
    def __init__(self):
        self.state = KeccakState()

    def absorb_block(self, block):
        self.state.absorb(block)
        keccak_f(self.state.s)

    def absorb(self, data):
        """Pad `data` and absorb every resulting block."""
        padded = bytes(data) + multirate_padding(len(data), RATE_BYTES)
        for offset in range(0, len(padded), RATE_BYTES):
            self.absorb_block(padded[offset : offset + RATE_BYTES])

    def squeeze(self, length):
        """Read `length` bytes straight off the rate; no further permutation."""
        assert length <= RATE_BYTES
        return self.state.squeeze()[:length]


def hash_bytes(data):
    """Keccak-256 of raw bytes, as a 32-byte digest."""
    sponge = KeccakSponge()
    sponge.absorb(data)
    return sponge.squeeze(DIGEST_BYTES)
