"""
Keccak-f[1600]: the 24-round permutation over a 5x5 array of 64-bit lanes.

The state is indexed a[x][y]. Every step works in place on that array so a
single list-of-lists serves the whole computation.
"""

from operator import xor
from functools import reduce
from math import log2

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

W = 5
H = 5
LANE_BITS = 64
ROUNDS = 12 + 2 * int(log2(LANE_BITS))
LANE_MASK = (1 << LANE_BITS) - 1

RoundConstants = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Indexed [y][x].
RotationConstants = (
    (0, 1, 62, 28, 27),
    (36, 44, 6, 55, 20),
    (3, 10, 43, 25, 39),
    (41, 45, 15, 21, 8),
    (18, 2, 61, 56, 14),
)

# Destination (x, y) of the lane found at source (x, y) after pi.
PiMapping = tuple(
    tuple((y, (2 * x + 3 * y) % H) for y in range(H)) for x in range(W)
)


def rol(value, left):
    """Rotate a 64-bit lane left by `left` bits."""
    left %= LANE_BITS
    return ((value << left) & LANE_MASK) | (value >> (LANE_BITS - left))


def new_state():
    return [[0] * H for _ in range(W)]


# --------------------------------------------------------------------
#                          Step Mappings
# --------------------------------------------------------------------

def theta(a):
    c = [reduce(xor, a[x]) for x in range(W)]
    for x in range(W):
        d = c[(x - 1) % W] ^ rol(c[(x + 1) % W], 1)
        for y in range(H):
            a[x][y] ^= d


def rho(a):
    for x in range(W):
        for y in range(H):
            a[x][y] = rol(a[x][y], RotationConstants[y][x])


def pi(a):
    b = [column[:] for column in a]
    for x in range(W):
        for y in range(H):
            nx, ny = PiMapping[x][y]
            a[nx][ny] = b[x][y]


def chi(a):
    for y in range(H):
        row = [a[x][y] for x in range(W)]
        for x in range(W):
            # ~ on a Python int is negative; the & with a 64-bit lane masks it back
            a[x][y] = row[x] ^ ((~row[(x + 1) % W]) & row[(x + 2) % W])


def iota(a, rc):
    a[0][0] ^= rc


# --------------------------------------------------------------------
#                          Keccak Permutation
# --------------------------------------------------------------------

def keccak_round(a, rc):
    theta(a)
    rho(a)
    pi(a)
    chi(a)
    iota(a, rc)


def keccak_f(a):
    """Apply all ROUNDS rounds of Keccak-f[1600] to the 5x5 lane array `a`, in place."""
    for ir in range(ROUNDS):
        keccak_round(a, RoundConstants[ir])
    return a
