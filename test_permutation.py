#!/usr/bin/env python3
"""
Keccak-f[1600] permutation tests

Tests:
1. Constant tables have the published shape
2. Each step mapping on hand-built states
3. One round on the zero state leaves only the first round constant
4. Full permutation of the zero state matches the published first lane
"""

from keccak256.permutation import (
    LANE_MASK,
    PiMapping,
    ROUNDS,
    RotationConstants,
    RoundConstants,
    chi,
    iota,
    keccak_f,
    keccak_round,
    new_state,
    pi,
    rho,
    rol,
    theta,
)


def test_tables():
    assert ROUNDS == 24, f"Expected 24 rounds, got {ROUNDS}"
    assert len(RoundConstants) == 24
    assert all(0 <= rc <= LANE_MASK for rc in RoundConstants)
    offsets = [r for row in RotationConstants for r in row]
    assert len(offsets) == 25 and len(set(offsets)) == 25, "rotation offsets must be distinct"
    assert min(offsets) == 0 and max(offsets) == 62, "published rho offsets span 0..62"
    assert all(0 <= r < 64 for r in offsets)
    targets = {PiMapping[x][y] for x in range(5) for y in range(5)}
    assert len(targets) == 25, "pi must be a permutation of lane positions"
    assert PiMapping[0][0] == (0, 0)


def test_rol():
    assert rol(1, 1) == 2
    assert rol(1 << 63, 1) == 1, "top bit should wrap to bit 0"
    assert rol(0x8000000000000001, 4) == 0x18
    assert rol(0x0123456789ABCDEF, 0) == 0x0123456789ABCDEF
    assert rol(0x0123456789ABCDEF, 64) == 0x0123456789ABCDEF


def test_theta_single_bit():
    """A single set bit touches its own lane plus two neighbouring columns."""
    a = new_state()
    a[0][0] = 1
    theta(a)
    assert a[0][0] == 1
    for y in range(5):
        assert a[1][y] == 1, f"column 1 gets C[0], lane y={y} was {a[1][y]:#x}"
        assert a[4][y] == 2, f"column 4 gets rol(C[0], 1), lane y={y} was {a[4][y]:#x}"
        assert a[2][y] == 0 and a[3][y] == 0
    for y in range(1, 5):
        assert a[0][y] == 0


def test_rho():
    a = new_state()
    for x in range(5):
        for y in range(5):
            a[x][y] = 1
    rho(a)
    for x in range(5):
        for y in range(5):
            assert a[x][y] == 1 << RotationConstants[y][x]


def test_pi():
    a = new_state()
    for x in range(5):
        for y in range(5):
            a[x][y] = x + 5 * y
    pi(a)
    for x in range(5):
        for y in range(5):
            nx, ny = PiMapping[x][y]
            assert a[nx][ny] == x + 5 * y
    assert a[0][2] == 1, "lane (1, 0) moves to (0, 2)"


def test_chi():
    a = new_state()
    a[1][0] = 0
    a[2][0] = LANE_MASK
    chi(a)
    assert a[0][0] == LANE_MASK, "lane 0 gets (~lane1) & lane2"
    a = new_state()
    a[0][3] = 0xF0
    chi(a)
    # row y=3: lane 3 = 0 ^ (~0 & 0xF0), lane 4 = 0 ^ (~0xF0 & 0)
    assert a[3][3] == 0xF0
    assert a[4][3] == 0
    assert a[0][3] == 0xF0
    assert all(0 <= a[x][y] <= LANE_MASK for x in range(5) for y in range(5))


def test_iota():
    a = new_state()
    iota(a, RoundConstants[2])
    assert a[0][0] == 0x800000000000808A
    assert sum(a[x][y] for x in range(5) for y in range(5) if (x, y) != (0, 0)) == 0


def test_round_on_zero_state():
    a = new_state()
    keccak_round(a, RoundConstants[0])
    assert a[0][0] == 1
    assert all(a[x][y] == 0 for x in range(5) for y in range(5) if (x, y) != (0, 0))


def test_keccak_f_zero_state():
    a = keccak_f(new_state())
    assert a[0][0] == 0xF1258F7940E1DDE7, f"got {a[0][0]:#018x}"
    assert all(0 <= a[x][y] <= LANE_MASK for x in range(5) for y in range(5))


def test_keccak_f_deterministic():
    a = keccak_f(new_state())
    b = keccak_f(new_state())
    assert a == b
    assert keccak_f(a) != b, "a second application should move the state again"


def run_tests():
    print("\n" + "=" * 60)
    print("Keccak-f[1600] permutation tests")
    print("=" * 60 + "\n")

    test_tables()
    test_rol()
    test_theta_single_bit()
    test_rho()
    test_pi()
    test_chi()
    test_iota()
    test_round_on_zero_state()
    test_keccak_f_zero_state()
    test_keccak_f_deterministic()

    print("✓ All permutation tests passed\n")


if __name__ == "__main__":
    run_tests()
