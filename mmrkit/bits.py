"""Bit level helpers and size arithmetic for merkle mountain ranges."""

__all__ = [
    "bit_length",
    "log2_uint64",
    "log2_uint32",
    "all_ones",
    "is_pow2",
    "height_index_size",
    "height_max_index",
    "height_size",
]


def bit_length(num: int) -> int:
    """Return the number of bits needed to represent ``num``."""
    return num.bit_length()


def log2_uint64(num: int) -> int:
    """Return the floor of log base 2 of ``num``."""
    if num <= 0:
        raise ValueError("log2 is undefined for values below one")
    return num.bit_length() - 1


def log2_uint32(num: int) -> int:
    """Return the floor of log base 2 of a 32 bit ``num``."""
    if not 0 < num <= 0xFFFFFFFF:
        raise ValueError("value must be a non zero 32 bit unsigned integer")
    return num.bit_length() - 1


def all_ones(num: int) -> bool:
    """Return True if the binary form of ``num`` is all ones (zero counts)."""
    return (1 << num.bit_count()) - 1 == num


def is_pow2(size: int) -> bool:
    """Return True if ``size`` is a perfect power of two."""
    return size > 0 and size & (size - 1) == 0


def height_index_size(height_index: int) -> int:
    """Return the node count of a perfect tree with the zero based height index."""
    return (2 << height_index) - 1


def height_max_index(height_index: int) -> int:
    """Return the last node index of a perfect tree with the zero based height index."""
    return (2 << height_index) - 2


def height_size(height: int) -> int:
    """Return the size of a perfect tree with the one based ``height``."""
    return (1 << height) - 1