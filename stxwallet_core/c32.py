"""
Crockford-style base-32 ("c32") codec used by Stacks addresses.

An address is ``"S" + version_char + c32(hash160 || checksum)`` where the
checksum is the first four bytes of double SHA-256 over
``version_byte || hash160``.

Leading zero bytes are preserved as leading ``'0'`` characters, the same
way base58 preserves them as ``'1'``.
"""

from __future__ import annotations

from stxwallet_core.crypto_utils import sha256d
from stxwallet_core.errors import EncodingError

C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_C32_INDEX = {ch: i for i, ch in enumerate(C32_ALPHABET)}

# Characters that decode to something else (Crockford normalisation)
_NORMALISE = str.maketrans({"O": "0", "L": "1", "I": "1"})

CHECKSUM_LEN = 4
ADDRESS_HASH_LEN = 20
MAX_VERSION = 31


def c32_normalize(text: str) -> str:
    return text.upper().translate(_NORMALISE)


def c32_encode(data: bytes) -> str:
    """Encode *data* as c32 (big-endian, no padding)."""
    n = int.from_bytes(data, "big")
    digits: list[str] = []
    while n > 0:
        n, rem = divmod(n, 32)
        digits.append(C32_ALPHABET[rem])
    zeros = len(data) - len(data.lstrip(b"\x00"))
    return "0" * zeros + "".join(reversed(digits))


def c32_decode(text: str) -> bytes:
    """Decode a c32 string back to bytes."""
    text = c32_normalize(text)
    n = 0
    for ch in text:
        idx = _C32_INDEX.get(ch)
        if idx is None:
            raise EncodingError(f"Invalid c32 character: {ch!r}")
        n = n * 32 + idx
    zeros = len(text) - len(text.lstrip("0"))
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    return b"\x00" * zeros + body


def c32check_encode(version: int, data: bytes) -> str:
    """Version character followed by c32(data || checksum)."""
    if not 0 <= version <= MAX_VERSION:
        raise EncodingError(f"Invalid c32 version: {version}")
    checksum = sha256d(bytes([version]) + data)[:CHECKSUM_LEN]
    return C32_ALPHABET[version] + c32_encode(data + checksum)


def c32check_decode(text: str) -> tuple[int, bytes]:
    """Inverse of :func:`c32check_encode`. Returns ``(version, data)``."""
    text = c32_normalize(text)
    if len(text) < 2:
        raise EncodingError("c32check string too short")
    version = _C32_INDEX.get(text[0])
    if version is None:
        raise EncodingError(f"Invalid c32 version character: {text[0]!r}")
    payload = c32_decode(text[1:])
    if len(payload) < CHECKSUM_LEN:
        raise EncodingError("c32check payload too short")
    data, checksum = payload[:-CHECKSUM_LEN], payload[-CHECKSUM_LEN:]
    if sha256d(bytes([version]) + data)[:CHECKSUM_LEN] != checksum:
        raise EncodingError("c32check checksum mismatch")
    return version, data


def c32_address(data: bytes, version: int) -> str:
    """Render a 20-byte hash as a Stacks address string."""
    if len(data) != ADDRESS_HASH_LEN:
        raise EncodingError(
            f"Address hash must be {ADDRESS_HASH_LEN} bytes, got {len(data)}"
        )
    return "S" + c32check_encode(version, data)


def c32_address_decode(address: str) -> tuple[int, bytes]:
    """Parse a Stacks address into ``(version, hash160)``."""
    if len(address) < 3 or address[0].upper() != "S":
        raise EncodingError(f"Not a Stacks address: {address!r}")
    version, data = c32check_decode(address[1:])
    if len(data) != ADDRESS_HASH_LEN:
        raise EncodingError(f"Address hash must be {ADDRESS_HASH_LEN} bytes")
    return version, data
