# resource_lifecycle/identity.py

import hashlib

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF

ALGORITHMS = ("fnv1a", "blake2b")


def fnv1a_64(data: bytes) -> int:
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & MASK_64
    return h


def blake2b_64(data: bytes) -> int:
    return int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big")


def identity_hash(name: str, algorithm: str = "fnv1a") -> int:
    """
    Детерминированный 64-битный беззнаковый хеш имени ресурса.
    Встроенный hash() не подходит: он рандомизируется между процессами.

    :param name: имя ресурса
    :param algorithm: "fnv1a" или "blake2b"
    """
    data = name.encode("utf-8")
    if algorithm == "fnv1a":
        return fnv1a_64(data)
    if algorithm == "blake2b":
        return blake2b_64(data)
    raise ValueError(f"Unknown identity algorithm «{algorithm}»")
