"""
JA3 / JA3S fingerprint text codec.

A client fingerprint (JA3) is five comma-separated fields, a server
fingerprint (JA3S) is three. Each field is a dash-separated list of decimal
codes::

    771,4865-4866-4867,0-23-65281,29-23-24,0
    771,4865,43-51

See https://github.com/salesforce/ja3. Hashing the string is left to the
caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import ClassVar, Final, TypeVar

from ja3kit.codes import (
    CipherSuite,
    Code,
    ECPointFormat,
    ExtensionType,
    NamedGroup,
    ProtocolVersion,
)
from ja3kit.errors import MalformedFingerprintError

logger = logging.getLogger(__name__)

FIELD_DELIMITER: Final[str] = ","
VALUE_DELIMITER: Final[str] = "-"
JA3_ARITY: Final[int] = 5
JA3S_ARITY: Final[int] = 3

C = TypeVar("C", bound=Code)
F = TypeVar("F", bound="_Fingerprint")


def _parse_int(token: str) -> int:
    # Decimal digits with an optional leading "+"; no whitespace, no "_".
    digits = token[1:] if token.startswith("+") else token
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"invalid decimal token {token!r}")
    return int(digits)


def _parse_field(raw: str, code_type: type[C], index: int) -> tuple[C, ...]:
    if not raw:
        return ()
    out: list[C] = []
    for token in raw.split(VALUE_DELIMITER):
        try:
            out.append(code_type(_parse_int(token)))
        except ValueError as exc:
            logger.debug(
                "Rejecting fingerprint field %d token %r as %s: %s",
                index,
                token,
                code_type.__name__,
                exc,
            )
            raise MalformedFingerprintError(field=index, token=token) from exc
    return tuple(out)


def _render_field(codes: Iterable[Code]) -> str:
    return VALUE_DELIMITER.join(str(int(code)) for code in codes)


def _codes(code_type: type[Code]):
    return field(default=(), metadata={"code": code_type})


@dataclass(frozen=True)
class _Fingerprint:
    ARITY: ClassVar[int]
    # Both forms split into at most five pieces and keep the first ARITY.
    _SPLIT: ClassVar[int] = JA3_ARITY

    def __post_init__(self) -> None:
        # Accept any iterable of ints and store tuples of the field's code type.
        for slot in fields(self):
            code_type = slot.metadata["code"]
            value = tuple(code_type(v) for v in getattr(self, slot.name))
            object.__setattr__(self, slot.name, value)

    @classmethod
    def parse(cls: type[F], text: str) -> F:
        """
        Parse fingerprint text into a record.

        The text is split into at most ``_SPLIT`` pieces and the first
        ``ARITY`` are used; missing trailing fields are empty. Commas past
        the split limit stay in the fifth piece, so a JA3 string with extra
        fields fails while a JA3S string ignores everything after its third
        field. Raises MalformedFingerprintError if any token is not an
        unsigned decimal integer that fits the field's width.
        """
        slots = fields(cls)
        parts = text.split(FIELD_DELIMITER, cls._SPLIT - 1)
        parts.extend([""] * (cls.ARITY - len(parts)))
        parts = parts[: cls.ARITY]
        values = {
            slot.name: _parse_field(raw, slot.metadata["code"], index)
            for index, (slot, raw) in enumerate(zip(slots, parts))
        }
        return cls(**values)

    def render(self) -> str:
        return FIELD_DELIMITER.join(
            _render_field(getattr(self, slot.name)) for slot in fields(self)
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Ja3(_Fingerprint):
    """JA3 client fingerprint: the ClientHello parameters in offer order."""

    ARITY: ClassVar[int] = JA3_ARITY

    ssl_versions: tuple[ProtocolVersion, ...] = _codes(ProtocolVersion)
    ciphers: tuple[CipherSuite, ...] = _codes(CipherSuite)
    ssl_extensions: tuple[ExtensionType, ...] = _codes(ExtensionType)
    elliptic_curves: tuple[NamedGroup, ...] = _codes(NamedGroup)
    elliptic_curve_point_formats: tuple[ECPointFormat, ...] = _codes(ECPointFormat)


@dataclass(frozen=True)
class Ja3S(_Fingerprint):
    """JA3S server fingerprint: the ServerHello parameters."""

    ARITY: ClassVar[int] = JA3S_ARITY

    ssl_versions: tuple[ProtocolVersion, ...] = _codes(ProtocolVersion)
    ciphers: tuple[CipherSuite, ...] = _codes(CipherSuite)
    ssl_extensions: tuple[ExtensionType, ...] = _codes(ExtensionType)


def parse_ja3(text: str) -> Ja3:
    return Ja3.parse(text)


def parse_ja3s(text: str) -> Ja3S:
    return Ja3S.parse(text)


def render(fingerprint: Ja3 | Ja3S) -> str:
    return fingerprint.render()
