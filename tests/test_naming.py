import pytest

from radiuskit.naming import identifier


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", ""),
        ("User-Password", "UserPassword"),
        ("User_Password", "UserPassword"),
        ("user_password", "UserPassword"),
        ("expiry", "Expiry"),
        ("3Com-URL", "ThreeComURL"),
        ("3GPP-RAT-Type", "ThreeGPPRATType"),
    ],
)
def test_identifier(word, expected):
    assert identifier(word) == expected


def test_identifier_plus():
    assert identifier("Foo+Bar") == "FooPlusBar"


def test_identifier_initialism():
    assert identifier("nas-ip-address") == "NasIPAddress"