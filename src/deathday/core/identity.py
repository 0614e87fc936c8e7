from __future__ import annotations

# FNV-1a, 64-bit. Stable across processes, unlike the salted built-in hash().
FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1

IDENTITY_MAX = _MASK64


def fnv1a_64(data: bytes) -> int:
    h = FNV64_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV64_PRIME) & _MASK64
    return h


def identity_from_name(name: str) -> int:
    """Stable 64-bit identity of a name (FNV-1a over its UTF-8 bytes)."""
    return fnv1a_64(name.encode("utf-8"))
