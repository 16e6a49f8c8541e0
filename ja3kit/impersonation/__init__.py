from .profiles import PROFILES, ALIAS_MAP, get_profile, get_fingerprint
from .ja3 import apply_ja3_overrides, describe, label

__all__ = [
    "PROFILES",
    "ALIAS_MAP",
    "get_profile",
    "get_fingerprint",
    "apply_ja3_overrides",
    "describe",
    "label",
]
