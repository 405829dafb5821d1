"""
Tests for service/auth.py
"""

import jwt
from django.test import SimpleTestCase

from videos.service.auth import get_bearer_token, validate_jwt
from videos.service.errors import Unauthenticated
from videos.tests.helpers import make_jwt

SECRET = 'unit-test-secret'


class GetBearerTokenTest(SimpleTestCase):
    def test_extracts_token(self):
        self.assertEqual(get_bearer_token({'Authorization': 'Bearer abc.def.ghi'}), 'abc.def.ghi')

    def test_scheme_is_case_insensitive(self):
        self.assertEqual(get_bearer_token({'Authorization': 'bearer abc'}), 'abc')

    def test_missing_header(self):
        with self.assertRaises(Unauthenticated):
            get_bearer_token({})

    def test_wrong_scheme(self):
        with self.assertRaises(Unauthenticated):
            get_bearer_token({'Authorization': 'Basic dXNlcjpwYXNz'})

    def test_empty_token(self):
        with self.assertRaises(Unauthenticated):
            get_bearer_token({'Authorization': 'Bearer '})


class ValidateJwtTest(SimpleTestCase):
    def test_round_trip_returns_subject(self):
        token = make_jwt('user-123', SECRET)
        self.assertEqual(validate_jwt(token, SECRET), 'user-123')

    def test_wrong_secret(self):
        token = make_jwt('user-123', SECRET)
        with self.assertRaises(Unauthenticated):
            validate_jwt(token, 'other-secret')

    def test_expired_token(self):
        token = make_jwt('user-123', SECRET, expires_in=-60)
        with self.assertRaises(Unauthenticated):
            validate_jwt(token, SECRET)

    def test_wrong_issuer(self):
        token = jwt.encode(
            {'iss': 'someone-else', 'sub': 'user-123', 'exp': 9999999999}, SECRET, algorithm='HS256'
        )
        with self.assertRaises(Unauthenticated):
            validate_jwt(token, SECRET)

    def test_missing_expiry(self):
        token = jwt.encode({'iss': 'tubely-access', 'sub': 'user-123'}, SECRET, algorithm='HS256')
        with self.assertRaises(Unauthenticated):
            validate_jwt(token, SECRET)

    def test_unconfigured_secret(self):
        token = make_jwt('user-123', SECRET)
        with self.assertRaises(Unauthenticated):
            validate_jwt(token, '')

    def test_garbage_token(self):
        with self.assertRaises(Unauthenticated):
            validate_jwt('not-a-jwt', SECRET)
