"""
Unit tests for request signing.
"""

import base64
import hashlib
import hmac

import pytest

from carrot.signing import (
    render_value,
    request_id_for,
    sign,
    signed_params,
    string_to_sign
)


SECRET = "test-app-secret"
TIMESTAMP = 1350000000.25


def expected_signature(message):
    """Compute the signature independently of the library."""
    digest = hmac.new(SECRET.encode('utf-8'), message.encode('utf-8'), hashlib.sha256).digest()
    return base64.b64encode(digest).decode('ascii')


class TestStringToSign:
    """Test canonical string construction."""

    def test_keys_sorted_ascending(self):
        """Test that fields are rendered in key order, not input order."""
        message = string_to_sign("POST", "gocarrot.com", "/me/scores.json", {"b": "2", "a": "1"})

        assert message == "POST\ngocarrot.com\n/me/scores.json\na=1&b=2"

    def test_sig_excluded(self):
        """Test that an existing sig field is not part of the string."""
        params = {"b": "2", "a": "1"}
        with_sig = dict(params, sig="bogus")

        assert string_to_sign("POST", "h", "/e", with_sig) == string_to_sign("POST", "h", "/e", params)

    def test_values_rendered(self):
        """Test that non-string values are rendered with str() and None as empty."""
        message = string_to_sign("POST", "h", "/e", {"value": 42, "leaderboard_id": None})

        assert message == "POST\nh\n/e\nleaderboard_id=&value=42"

    def test_empty_params(self):
        """Test string with no fields."""
        assert string_to_sign("POST", "h", "/e", {}) == "POST\nh\n/e\n"


class TestSign:
    """Test signature computation."""

    def test_sign_matches_hmac_sha256_base64(self):
        """Test signature is base64 HMAC-SHA256 of the message."""
        message = "POST\ngocarrot.com\n/me/like.json\nobject=game"

        assert sign(SECRET, message) == expected_signature(message)

    def test_sign_has_no_trailing_newline(self):
        """Test that the base64 output is stripped."""
        signature = sign(SECRET, "message")

        assert signature == signature.strip()
        assert "\n" not in signature

    def test_sign_deterministic(self):
        """Test same input gives the same signature."""
        assert sign(SECRET, "message") == sign(SECRET, "message")
        assert sign(SECRET, "message") != sign("other-secret", "message")


class TestRequestId:
    """Test request id derivation."""

    def test_request_id_slice(self):
        """Test request id is characters 8 to 16 of the SHA-1 hex digest."""
        digest = hashlib.sha1(str(TIMESTAMP).encode('utf-8')).hexdigest()

        assert request_id_for(TIMESTAMP) == digest[8:16]
        assert len(request_id_for(TIMESTAMP)) == 8

    def test_request_id_varies_with_time(self):
        """Test different timestamps give different ids."""
        assert request_id_for(TIMESTAMP) != request_id_for(TIMESTAMP + 1)


class TestSignedParams:
    """Test full signed form construction."""

    @pytest.fixture
    def sign_kwargs(self):
        """Common signing arguments."""
        return {
            'app_id': "123456",
            'app_secret': SECRET,
            'hostname': "gocarrot.com",
            'endpoint': "/me/achievements.json",
            'user_id': "user@example.com",
            'timestamp': TIMESTAMP
        }

    def test_added_fields(self, sign_kwargs):
        """Test identity and request fields are added."""
        params = signed_params({'achievement_id': "first_blood"}, **sign_kwargs)

        assert params['achievement_id'] == "first_blood"
        assert params['api_key'] == "user@example.com"
        assert params['game_id'] == "123456"
        assert params['request_date'] == "1350000000"
        assert params['request_id'] == request_id_for(TIMESTAMP)
        assert 'sig' in params

    def test_signature_covers_all_other_fields(self, sign_kwargs):
        """Test sig is computed over every field except itself."""
        params = signed_params({'achievement_id': "first_blood"}, **sign_kwargs)

        unsigned = {key: value for key, value in params.items() if key != 'sig'}
        message = "POST\ngocarrot.com\n/me/achievements.json\n" + '&'.join(
            f"{key}={unsigned[key]}" for key in sorted(unsigned)
        )
        assert params['sig'] == expected_signature(message)

    def test_existing_sig_ignored(self, sign_kwargs):
        """Test a caller supplied sig does not affect signing."""
        clean = signed_params({'achievement_id': "first_blood"}, **sign_kwargs)
        dirty = signed_params({'achievement_id': "first_blood", 'sig': "forged"}, **sign_kwargs)

        assert dirty == clean

    def test_deterministic_with_fixed_time(self, sign_kwargs):
        """Test signing is deterministic for a fixed timestamp."""
        payload = {'value': 100, 'leaderboard_id': ""}

        assert signed_params(payload, **sign_kwargs) == signed_params(payload, **sign_kwargs)

    def test_payload_not_mutated(self, sign_kwargs):
        """Test the caller's payload is left untouched."""
        payload = {'achievement_id': "first_blood"}
        signed_params(payload, **sign_kwargs)

        assert payload == {'achievement_id': "first_blood"}

    def test_all_values_are_strings(self, sign_kwargs):
        """Test every field is rendered to a string, None included."""
        sign_kwargs['user_id'] = None
        params = signed_params({'value': 7}, **sign_kwargs)

        assert params['value'] == "7"
        assert params['api_key'] == ""
        assert all(isinstance(value, str) for value in params.values())


def test_render_value():
    """Test value rendering."""
    assert render_value(None) == ""
    assert render_value(3) == "3"
    assert render_value("x") == "x"
