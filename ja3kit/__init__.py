from ja3kit.codes import (
    Code,
    ProtocolVersion,
    CipherSuite,
    ExtensionType,
    NamedGroup,
    ECPointFormat,
)
from ja3kit.errors import Ja3KitError, MalformedFingerprintError, UnknownProfileError
from ja3kit.ja3 import (
    Ja3,
    Ja3S,
    parse_ja3,
    parse_ja3s,
    render,
    FIELD_DELIMITER,
    VALUE_DELIMITER,
    JA3_ARITY,
    JA3S_ARITY,
)

__all__ = [
    "Code",
    "ProtocolVersion",
    "CipherSuite",
    "ExtensionType",
    "NamedGroup",
    "ECPointFormat",
    "Ja3KitError",
    "MalformedFingerprintError",
    "UnknownProfileError",
    "Ja3",
    "Ja3S",
    "parse_ja3",
    "parse_ja3s",
    "render",
    "FIELD_DELIMITER",
    "VALUE_DELIMITER",
    "JA3_ARITY",
    "JA3S_ARITY",
]
