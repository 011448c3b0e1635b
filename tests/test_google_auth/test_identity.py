"""Tests for VerifiedIdentity and internal user id derivation."""

import hashlib

from tabflow_api.google_auth.identity import AuthProvider, VerifiedIdentity, derive_internal_user_id


def test_internal_user_id_is_sha256_of_provider_and_subject():
    expected = hashlib.sha256(b"google:12345").hexdigest()
    assert derive_internal_user_id(AuthProvider.GOOGLE, "12345") == expected


def test_internal_user_id_is_deterministic():
    a = derive_internal_user_id(AuthProvider.GOOGLE, "110169484474386276334")
    b = derive_internal_user_id(AuthProvider.GOOGLE, "110169484474386276334")
    assert a == b
    assert len(a) == 64


def test_distinct_subjects_get_distinct_ids():
    subjects = ["1", "2", "10", "01", "google:1", "a" * 100, "ü"]
    ids = {derive_internal_user_id(AuthProvider.GOOGLE, s) for s in subjects}
    assert len(ids) == len(subjects)


def test_internal_user_id_does_not_contain_subject():
    subject = "110169484474386276334"
    assert subject not in derive_internal_user_id(AuthProvider.GOOGLE, subject)


def test_from_subject_and_to_dict_omits_raw_subject():
    identity = VerifiedIdentity.from_subject("sub-1", email="user@example.com", email_verified=True)
    assert identity.provider is AuthProvider.GOOGLE
    assert identity.provider_subject == "sub-1"
    d = identity.to_dict()
    assert d == {
        "userId": derive_internal_user_id(AuthProvider.GOOGLE, "sub-1"),
        "authProvider": "google",
        "email": "user@example.com",
    }
    assert "sub-1" not in d.values()


def test_email_defaults_to_none():
    identity = VerifiedIdentity.from_subject("sub-2")
    assert identity.email is None
    assert identity.email_verified is False
