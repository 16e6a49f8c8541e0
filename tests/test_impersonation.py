"""Tests for ja3kit.impersonation.ja3 module."""

import pytest
from ja3kit.codes import CipherSuite
from ja3kit.errors import MalformedFingerprintError
from ja3kit.impersonation.ja3 import SIGNATURES, apply_ja3_overrides, describe, label
from ja3kit.ja3 import Ja3, Ja3S


class TestApplyJa3Overrides:
    """Tests for apply_ja3_overrides function."""

    def test_none_returns_unchanged(self):
        """Test None returns profile unchanged."""
        profile = {"tls": {"alpn": ["h2"]}}
        result = apply_ja3_overrides(profile, None)
        assert result == {"tls": {"alpn": ["h2"]}}

    def test_empty_string_returns_unchanged(self):
        """Test an empty string returns profile unchanged."""
        profile = {"tls": {"alpn": ["h2"]}}
        result = apply_ja3_overrides(profile, "")
        assert result == {"tls": {"alpn": ["h2"]}}

    def test_apply_string(self, chrome_ja3_text):
        """Test JA3 text is parsed and mirrored into the profile."""
        result = apply_ja3_overrides({}, chrome_ja3_text)
        assert result["ja3_str"] == chrome_ja3_text
        assert result["tls"]["versions"] == [771]
        assert result["tls"]["curves"] == [29, 23, 24]
        assert result["tls"]["point_formats"] == [0]
        assert type(result["tls"]["ciphers"][0]) is int

    def test_apply_record_skips_parse(self, mocker, sample_ja3):
        """Test a parsed record is used directly."""
        spy = mocker.spy(Ja3, "parse")
        result = apply_ja3_overrides({}, sample_ja3)
        assert spy.call_count == 0
        assert result["ja3_str"] == sample_ja3.render()
        assert result["tls"]["extensions"] == [0, 23, 65281]

    def test_empty_fields_not_written(self):
        """Test empty fields don't add empty entries."""
        result = apply_ja3_overrides({}, "771,4865,,,")
        assert set(result["tls"]) == {"versions", "ciphers"}
        assert result["ja3_str"] == "771,4865,,,"

    def test_preserves_existing_profile(self):
        """Test unrelated profile keys survive."""
        profile = {"tls": {"alpn": ["h2"]}, "headers": {"default": []}}
        result = apply_ja3_overrides(profile, "771,4865,,,")
        assert result["tls"]["alpn"] == ["h2"]
        assert result["headers"] == {"default": []}

    def test_replaces_existing_values(self):
        """Test existing TLS values are replaced."""
        profile = {"tls": {"ciphers": [47]}}
        result = apply_ja3_overrides(profile, ",4865-4866,,,")
        assert result["tls"]["ciphers"] == [4865, 4866]

    def test_malformed_raises(self):
        """Test malformed text propagates the parse error."""
        with pytest.raises(MalformedFingerprintError):
            apply_ja3_overrides({}, "771,abc,,,")

    def test_server_record_rejected(self, sample_ja3s):
        """Test a Ja3S record raises TypeError and leaves the profile alone."""
        profile = {"tls": {"alpn": ["h2"]}}
        with pytest.raises(TypeError, match="Ja3S"):
            apply_ja3_overrides(profile, sample_ja3s)
        assert profile == {"tls": {"alpn": ["h2"]}}

    def test_signatures_constant(self):
        """Test SIGNATURES covers every Ja3 field."""
        assert set(SIGNATURES.values()) == {
            "ssl_versions",
            "ciphers",
            "ssl_extensions",
            "elliptic_curves",
            "elliptic_curve_point_formats",
        }


class TestDescribe:
    """Tests for describe and label."""

    def test_label_named(self):
        """Test named codes use their symbolic name."""
        assert label(CipherSuite(0x1301)) == "TLS_AES_128_GCM_SHA256"

    def test_label_unknown(self):
        """Test unknown codes fall back to hex."""
        assert label(CipherSuite(0xABCD)) == "0xabcd"

    def test_describe_client(self, sample_ja3):
        """Test describe lists every field in order."""
        out = describe(sample_ja3)
        assert list(out) == [
            "ssl_versions",
            "ciphers",
            "ssl_extensions",
            "elliptic_curves",
            "elliptic_curve_point_formats",
        ]
        assert out["ssl_versions"] == ["TLSv1_2"]
        assert out["ciphers"] == ["TLS_AES_128_GCM_SHA256", "TLS_AES_256_GCM_SHA384"]
        assert out["ssl_extensions"] == ["SERVER_NAME", "EXTENDED_MASTER_SECRET", "RENEGOTIATION_INFO"]
        assert out["elliptic_curves"] == ["X25519", "SECP256R1"]
        assert out["elliptic_curve_point_formats"] == ["UNCOMPRESSED"]

    def test_describe_unknown_point_format(self):
        """Test 8-bit codes use two hex digits."""
        out = describe(Ja3(elliptic_curve_point_formats=[200]))
        assert out["elliptic_curve_point_formats"] == ["0xc8"]
        assert out["ciphers"] == []

    def test_describe_server(self, sample_ja3s):
        """Test describe on a server record."""
        out = describe(sample_ja3s)
        assert out == {
            "ssl_versions": ["TLSv1_2"],
            "ciphers": ["TLS_AES_128_GCM_SHA256"],
            "ssl_extensions": ["SUPPORTED_VERSIONS", "KEY_SHARE"],
        }
        assert isinstance(sample_ja3s, Ja3S)
