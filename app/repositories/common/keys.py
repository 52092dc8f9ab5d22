"""Cache key derivation."""

import hashlib
from collections.abc import Sequence


def derive_key(parts: Sequence[str]) -> str:
    """Deterministic, order-sensitive SHA-256 key for a tuple of identifiers.

    Each part is length-prefixed before hashing, so ``["a|b", "c"]`` and
    ``["a", "b|c"]`` never share a key whatever characters the parts contain.
    """
    encoded = "".join(f"{len(part)}:{part}" for part in parts)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()
