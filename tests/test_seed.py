import pytest

from dungeongen.errors import SeedError
from dungeongen.seed import create_hash, random_text, resolve_seed, seed_bytes


def test_create_hash_is_sha256_hex():
    h = create_hash("brian")
    assert len(h) == 64
    assert h == create_hash("brian")
    assert h != create_hash("brain")
    assert create_hash("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_seed_bytes_takes_first_32():
    h = create_hash("brian")
    assert seed_bytes(h) == h[:32].encode()
    with pytest.raises(SeedError):
        seed_bytes("too short")


def test_random_text():
    t = random_text()
    assert len(t) == 32 and t.isalnum()


def test_resolve_seed_precedence():
    explicit = "x" * 32
    assert resolve_seed(seed=explicit, text="ignored") == explicit
    assert resolve_seed(text="brian") == create_hash("brian")
    assert len(resolve_seed()) == 64
    with pytest.raises(SeedError):
        resolve_seed(seed="abc")
