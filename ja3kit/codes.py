"""
Open enumerations for the TLS parameters that appear in JA3/JA3S strings.

Each type is a thin ``int`` wrapper of a fixed bit width. Any value in range
is a valid code; well-known values are additionally exposed as class
attributes and carry a symbolic ``name``.
"""

from __future__ import annotations

import operator
from typing import ClassVar


class Code(int):
    """Fixed-width unsigned TLS code. Subclasses set ``BITS``."""

    BITS: ClassVar[int] = 16
    _names: ClassVar[dict[int, str]] = {}
    _values: ClassVar[dict[str, int]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Start from the parent's names so subclasses extend them.
        cls._names = dict(cls._names)
        cls._values = dict(cls._values)
        for attr, value in list(vars(cls).items()):
            if attr.startswith("_") or attr == "BITS":
                continue
            if type(value) is not int:
                continue
            code = cls(value)
            setattr(cls, attr, code)
            cls._names.setdefault(value, attr)
            cls._values[attr] = value

    def __new__(cls, value: int = 0):
        value = operator.index(value)
        if not 0 <= value < (1 << cls.BITS):
            raise ValueError(
                f"{cls.__name__} value {value} does not fit in {cls.BITS} bits"
            )
        return super().__new__(cls, value)

    @classmethod
    def from_name(cls, name: str):
        try:
            return cls(cls._values[name])
        except KeyError as exc:
            raise KeyError(f"Unknown {cls.__name__} name '{name}'") from exc

    @property
    def name(self) -> str | None:
        return self._names.get(int(self))

    def __repr__(self) -> str:
        name = self.name
        if name is not None:
            return f"{type(self).__name__}.{name}"
        width = self.BITS // 4
        return f"{type(self).__name__}(0x{int(self):0{width}x})"

    __str__ = int.__repr__


class ProtocolVersion(Code):
    BITS = 16

    SSLv2 = 0x0200
    SSLv3 = 0x0300
    TLSv1_0 = 0x0301
    TLSv1_1 = 0x0302
    TLSv1_2 = 0x0303
    TLSv1_3 = 0x0304
    DTLSv1_0 = 0xFEFF
    DTLSv1_2 = 0xFEFD
    DTLSv1_3 = 0xFEFC


class CipherSuite(Code):
    BITS = 16

    TLS_NULL_WITH_NULL_NULL = 0x0000
    TLS_RSA_WITH_3DES_EDE_CBC_SHA = 0x000A
    TLS_RSA_WITH_AES_128_CBC_SHA = 0x002F
    TLS_RSA_WITH_AES_256_CBC_SHA = 0x0035
    TLS_RSA_WITH_AES_128_GCM_SHA256 = 0x009C
    TLS_RSA_WITH_AES_256_GCM_SHA384 = 0x009D
    TLS_EMPTY_RENEGOTIATION_INFO_SCSV = 0x00FF
    TLS_AES_128_GCM_SHA256 = 0x1301
    TLS_AES_256_GCM_SHA384 = 0x1302
    TLS_CHACHA20_POLY1305_SHA256 = 0x1303
    TLS_AES_128_CCM_SHA256 = 0x1304
    TLS_AES_128_CCM_8_SHA256 = 0x1305
    TLS_FALLBACK_SCSV = 0x5600
    TLS_ECDHE_ECDSA_WITH_3DES_EDE_CBC_SHA = 0xC008
    TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA = 0xC009
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA = 0xC00A
    TLS_ECDHE_RSA_WITH_3DES_EDE_CBC_SHA = 0xC012
    TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA = 0xC013
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
    TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256 = 0xC023
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384 = 0xC024
    TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256 = 0xC027
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384 = 0xC028
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384 = 0xC02C
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384 = 0xC030
    TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA8
    TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA9


class ExtensionType(Code):
    BITS = 16

    SERVER_NAME = 0
    MAX_FRAGMENT_LENGTH = 1
    CLIENT_CERTIFICATE_URL = 2
    TRUSTED_CA_KEYS = 3
    TRUNCATED_HMAC = 4
    STATUS_REQUEST = 5
    USER_MAPPING = 6
    CLIENT_AUTHZ = 7
    SERVER_AUTHZ = 8
    CERT_TYPE = 9
    SUPPORTED_GROUPS = 10
    EC_POINT_FORMATS = 11
    SRP = 12
    SIGNATURE_ALGORITHMS = 13
    USE_SRTP = 14
    HEARTBEAT = 15
    APPLICATION_LAYER_PROTOCOL_NEGOTIATION = 16
    STATUS_REQUEST_V2 = 17
    SIGNED_CERTIFICATE_TIMESTAMP = 18
    CLIENT_CERTIFICATE_TYPE = 19
    SERVER_CERTIFICATE_TYPE = 20
    PADDING = 21
    ENCRYPT_THEN_MAC = 22
    EXTENDED_MASTER_SECRET = 23
    COMPRESS_CERTIFICATE = 27
    RECORD_SIZE_LIMIT = 28
    DELEGATED_CREDENTIALS = 34
    SESSION_TICKET = 35
    PRE_SHARED_KEY = 41
    EARLY_DATA = 42
    SUPPORTED_VERSIONS = 43
    COOKIE = 44
    PSK_KEY_EXCHANGE_MODES = 45
    CERTIFICATE_AUTHORITIES = 47
    OID_FILTERS = 48
    POST_HANDSHAKE_AUTH = 49
    SIGNATURE_ALGORITHMS_CERT = 50
    KEY_SHARE = 51
    TRANSPORT_PARAMETERS = 57
    NEXT_PROTOCOL_NEGOTIATION = 13172
    APPLICATION_SETTINGS = 17513
    ENCRYPTED_CLIENT_HELLO = 0xFE0D
    RENEGOTIATION_INFO = 0xFF01


class NamedGroup(Code):
    BITS = 16

    SECP256R1 = 23
    SECP384R1 = 24
    SECP521R1 = 25
    X25519 = 29
    X448 = 30
    FFDHE2048 = 256
    FFDHE3072 = 257
    FFDHE4096 = 258
    FFDHE6144 = 259
    FFDHE8192 = 260
    X25519MLKEM768 = 0x11EC
    X25519KYBER768DRAFT00 = 0x6399


class ECPointFormat(Code):
    BITS = 8

    UNCOMPRESSED = 0
    ANSIX962_COMPRESSED_PRIME = 1
    ANSIX962_COMPRESSED_CHAR2 = 2
