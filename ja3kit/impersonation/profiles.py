import copy

from ja3kit.errors import UnknownProfileError
from ja3kit.ja3 import Ja3

# JA3 strings are recorded with GREASE values already removed and the
# extension order of a representative capture.
PROFILES: dict[str, dict] = {
    "chrome_120": {
        "ja3": (
            "771,"
            "4865-4866-4867-49195-49199-49196-49200-52393-52392-49171-49172-156-157-47-53,"
            "0-23-65281-10-11-35-16-5-13-18-51-45-43-27-17513-21,"
            "29-23-24,"
            "0"
        ),
        "tls": {"alpn": ["h2", "http/1.1"]},
    },
    "chrome_131": {
        # X25519MLKEM768 (4588) leads the supported groups.
        "ja3": (
            "771,"
            "4865-4866-4867-49195-49199-49196-49200-52393-52392-49171-49172-156-157-47-53,"
            "0-23-65281-10-11-35-16-5-13-18-51-45-43-27-17513-65037,"
            "4588-29-23-24,"
            "0"
        ),
        "tls": {"alpn": ["h2", "http/1.1"]},
    },
    "firefox_120": {
        "ja3": (
            "771,"
            "4865-4867-4866-49195-49199-52393-52392-49196-49200-49162-49161-49171-49172-156-157-47-53,"
            "0-23-65281-10-11-16-5-34-51-43-13-45-28-65037,"
            "29-23-24-25-256-257,"
            "0"
        ),
        "tls": {"alpn": ["h2", "http/1.1"]},
    },
    "safari_170": {
        "ja3": (
            "771,"
            "4865-4866-4867-49196-49195-52393-49200-49199-52392-49162-49161-49172-49171-157-156-53-47-49160-49170-10,"
            "0-23-65281-10-11-16-5-13-18-51-45-43-27-21,"
            "29-23-24-25,"
            "0"
        ),
        "tls": {"alpn": ["h2", "http/1.1"]},
    },
}

ALIAS_MAP: dict[str, str] = {
    # Chrome
    "chrome119": "chrome_120",
    "chrome120": "chrome_120",
    "chrome124": "chrome_120",
    "chrome131": "chrome_131",
    "chrome133": "chrome_131",
    # Edge shares Chrome's stack
    "edge120": "chrome_120",
    "edge131": "chrome_131",
    # Firefox
    "firefox120": "firefox_120",
    "firefox121": "firefox_120",
    # Safari
    "safari170": "safari_170",
    "safari172": "safari_170",
}

# Materialize aliases into PROFILES for lookup.
for alias, target in list(ALIAS_MAP.items()):
    if alias not in PROFILES and target in PROFILES:
        PROFILES[alias] = PROFILES[target]


def get_profile(name: str) -> dict:
    try:
        return copy.deepcopy(PROFILES[name])
    except KeyError as exc:
        raise UnknownProfileError(f"Unknown fingerprint profile '{name}'") from exc


def get_fingerprint(name: str) -> Ja3:
    """Parse the client fingerprint recorded for a profile."""
    return Ja3.parse(get_profile(name)["ja3"])
