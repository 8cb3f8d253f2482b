"""Small helpers shared by test modules."""
import struct


def as_float32(value: float) -> float:
    """Round a Python float to the nearest binary32 value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]
