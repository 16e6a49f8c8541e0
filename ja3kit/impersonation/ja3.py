from __future__ import annotations

from dataclasses import fields
from typing import Final

from ja3kit.codes import Code
from ja3kit.ja3 import Ja3, Ja3S

# Profile "tls" key -> Ja3 field it is taken from.
SIGNATURES: Final[dict[str, str]] = {
    "versions": "ssl_versions",
    "ciphers": "ciphers",
    "extensions": "ssl_extensions",
    "curves": "elliptic_curves",
    "point_formats": "elliptic_curve_point_formats",
}


def apply_ja3_overrides(profile: dict, ja3: Ja3 | str | None) -> dict:
    """
    Apply a JA3 fingerprint onto a profile.

    ``ja3`` may be a parsed Ja3 record or JA3 text. The rendered string is
    stored as ``profile["ja3_str"]`` and each non-empty field is copied into
    ``profile["tls"]`` as a list of ints under the keys in SIGNATURES.
    Raises MalformedFingerprintError for unparseable text and TypeError for
    anything that is not a Ja3 record, including Ja3S.
    """
    if not ja3:
        return profile
    if isinstance(ja3, str):
        ja3 = Ja3.parse(ja3)
    elif not isinstance(ja3, Ja3):
        raise TypeError(f"Expected a Ja3 record or JA3 text, got {type(ja3).__name__}")
    profile["ja3_str"] = ja3.render()
    tls = profile.setdefault("tls", {})
    for key, attr in SIGNATURES.items():
        values = getattr(ja3, attr)
        if values:
            tls[key] = [int(v) for v in values]
    return profile


def label(code: Code) -> str:
    name = code.name
    if name is not None:
        return name
    return f"0x{int(code):0{code.BITS // 4}x}"


def describe(fingerprint: Ja3 | Ja3S) -> dict[str, list[str]]:
    """Symbolic view of a fingerprint, keyed by field name, in field order."""
    return {
        slot.name: [label(code) for code in getattr(fingerprint, slot.name)]
        for slot in fields(fingerprint)
    }
