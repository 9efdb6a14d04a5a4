"""Standard gate constructors."""

from .standard import (
    CCNOT,
    CH,
    CNOT,
    CRZ,
    CSWAP,
    CXBASE,
    CY,
    CZ,
    ISWAP,
    PSWAP,
    RX,
    RY,
    RZ,
    SWAP,
    H,
    I,
    S,
    T,
    X,
    Y,
    Z,
)

__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "T",
    "CNOT",
    "CCNOT",
    "CZ",
    "SWAP",
    "CSWAP",
    "ISWAP",
    "PSWAP",
    "RX",
    "RY",
    "RZ",
    "CH",
    "CRZ",
    "CY",
    "CXBASE",
]
