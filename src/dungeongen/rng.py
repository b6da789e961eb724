from dataclasses import dataclass

from .errors import SeedError

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SEED_LEN = 32


def pm_next(state: int) -> int:
    return (state * A) % M


def fold_seed(seed: bytes) -> int:
    """
    Collapse a 32-byte seed into a Park–Miller state.
    The eight big-endian 32-bit words are XORed together, then reduced into 1..M-1.
    """
    if len(seed) != SEED_LEN:
        raise SeedError(f"Seed must be exactly {SEED_LEN} bytes, got {len(seed)}")
    acc = 0
    for i in range(0, SEED_LEN, 4):
        acc ^= int.from_bytes(seed[i:i + 4], "big")
    state = acc % M
    return state or 1


@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: bytes) -> "PMRandom":
        return cls(fold_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def gen_range(self, low: int, high: int) -> int:
        """Uniform integer in [low, high). Exactly one draw from the stream."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        # state is 1..M-1; scale the high bits rather than taking a modulus
        return low + ((self.next32() - 1) * (high - low)) // (M - 1)
