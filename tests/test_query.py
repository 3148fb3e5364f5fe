"""Tests for core/query.py."""

# pylint: disable=missing-function-docstring

import pytest

from google_dns_api.core.query import (
    PADDING_ALPHABET,
    DNSQuery,
    generate_padding,
    normalize_client_subnet,
    normalize_name,
    normalize_padding,
    normalize_type,
)
from google_dns_api.utils.exceptions import InvalidArgumentError

ENDPOINT = "https://dns.google.com/resolve"


class TestNormalizeName:
    """Tests for normalize_name."""

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_rejects_empty(self, name):
        with pytest.raises(InvalidArgumentError):
            normalize_name(name)

    def test_plain_name_unchanged(self):
        assert normalize_name("example.com") == "example.com"

    def test_strips_trailing_dot_and_whitespace(self):
        assert normalize_name("  example.com.  ") == "example.com"

    def test_idn_converted_to_punycode(self):
        assert normalize_name("ελ") == "xn--qxam"

    def test_rejects_long_label(self):
        with pytest.raises(InvalidArgumentError):
            normalize_name("a" * 64 + ".com")

    def test_rejects_long_name(self):
        with pytest.raises(InvalidArgumentError):
            normalize_name(".".join(["a" * 63] * 5))

    def test_accepts_253_character_name(self):
        name = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 61])
        assert len(name) == 253
        assert normalize_name(name) == name
        assert normalize_name(name + ".") == name

    def test_rejects_254_character_name(self):
        name = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 62])
        assert len(name) == 254
        with pytest.raises(InvalidArgumentError):
            normalize_name(name)

    def test_rejects_empty_label(self):
        with pytest.raises(InvalidArgumentError):
            normalize_name("example..com")

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_name("")


class TestNormalizeType:
    """Tests for normalize_type."""

    def test_none_is_absent(self):
        assert normalize_type(None) is None

    def test_blank_is_absent(self):
        assert normalize_type("  ") is None

    @pytest.mark.parametrize(
        "value,expected",
        [("A", "A"), ("aaaa", "AAAA"), ("Mx", "MX"), ("ANY", "ANY")],
    )
    def test_mnemonic_canonicalized(self, value, expected):
        assert normalize_type(value) == expected

    @pytest.mark.parametrize("value", [1, 28, 255, 65535, "28"])
    def test_numeric_code_accepted(self, value):
        assert normalize_type(value) == str(value)

    @pytest.mark.parametrize("value", [0, 65536, -1, "0", "70000"])
    def test_numeric_code_out_of_range(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_type(value)

    def test_unknown_mnemonic(self):
        with pytest.raises(InvalidArgumentError):
            normalize_type("NOTATYPE")

    def test_bool_rejected(self):
        with pytest.raises(InvalidArgumentError):
            normalize_type(True)

    @pytest.mark.parametrize("value", ["\u00b2", "\u0663", "TYPE\u00b2"])
    def test_non_ascii_digits_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_type(value)


class TestNormalizeClientSubnet:
    """Tests for normalize_client_subnet."""

    @pytest.mark.parametrize(
        "value", ["1.2.3.4/24", "2001:700:300::/48", "0.0.0.0/0", "192.0.2.1"]
    )
    def test_valid_subnets_forwarded_as_given(self, value):
        assert normalize_client_subnet(value) == value

    @pytest.mark.parametrize("value", ["not-a-subnet", "1.2.3.4/33", "300.1.1.1/8"])
    def test_invalid_subnets(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_client_subnet(value)

    def test_blank_is_absent(self):
        assert normalize_client_subnet("") is None

    @pytest.mark.parametrize("value", [" 1.2.3.4/24", "1.2.3.4/24 "])
    def test_surrounding_whitespace_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_client_subnet(value)


class TestPadding:
    """Tests for padding validation and generation."""

    def test_unreserved_characters_accepted(self):
        assert normalize_padding("XmkMw~o_mgP2pf.gpw-Oi5dK") == "XmkMw~o_mgP2pf.gpw-Oi5dK"

    @pytest.mark.parametrize("value", ["has space", "amp&ersand", "slash/", "ünï"])
    def test_reserved_characters_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_padding(value)

    def test_empty_is_absent(self):
        assert normalize_padding("") is None

    def test_generate_padding_length_and_alphabet(self):
        padding = generate_padding(40)
        assert len(padding) == 40
        assert all(c in PADDING_ALPHABET for c in padding)

    def test_generate_padding_zero(self):
        assert generate_padding(0) == ""

    def test_generate_padding_negative(self):
        with pytest.raises(InvalidArgumentError):
            generate_padding(-1)


class TestDNSQuery:
    """Tests for DNSQuery parameter and URL building."""

    def test_only_name_when_options_absent(self):
        assert DNSQuery("example.com").params() == [("name", "example.com")]

    def test_all_params_in_fixed_order(self):
        query = DNSQuery(
            "example.com",
            type="aaaa",
            checking_disabled=True,
            client_subnet="1.2.3.4/24",
            padding="abc",
        )

        assert [key for key, _ in query.params()] == [
            "name",
            "type",
            "cd",
            "edns_client_subnet",
            "random_padding",
        ]
        assert ("type", "AAAA") in query.params()
        assert ("cd", "1") in query.params()

    def test_cd_false_omitted(self):
        query = DNSQuery("example.com", checking_disabled=False)
        assert "cd" not in dict(query.params())

    def test_build_url(self):
        url = DNSQuery("example.com", type="AAAA").build_url(ENDPOINT)
        assert str(url) == "https://dns.google.com/resolve?name=example.com&type=AAAA"

    def test_build_url_is_deterministic(self):
        first = DNSQuery("example.com", type="AAAA").build_url(ENDPOINT)
        second = DNSQuery("example.com", type="AAAA").build_url(ENDPOINT)
        assert str(first) == str(second)

    def test_absent_params_leave_no_empty_segments(self):
        url = str(DNSQuery("example.com", type="", client_subnet="").build_url(ENDPOINT))

        assert "type=" not in url
        assert "edns_client_subnet" not in url
        assert "random_padding" not in url
        assert not url.endswith("&")

    def test_client_subnet_round_trips_through_url(self):
        url = DNSQuery("example.com", client_subnet="2001:700:300::/48").build_url(
            ENDPOINT
        )
        assert url.query["edns_client_subnet"] == "2001:700:300::/48"

    def test_invalid_name_fails_on_construction(self):
        with pytest.raises(InvalidArgumentError):
            DNSQuery("   ")

    def test_padded_reaches_target_length(self):
        query = DNSQuery("example.com", type="A").padded(ENDPOINT, 200)

        assert query.padding is not None
        assert len(str(query.build_url(ENDPOINT))) == 200

    def test_padded_keeps_existing_padding(self):
        query = DNSQuery("example.com", padding="given")
        assert query.padded(ENDPOINT, 200) is query

    def test_padded_short_target_unchanged(self):
        query = DNSQuery("example.com")
        assert query.padded(ENDPOINT, 10) is query
