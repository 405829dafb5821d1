"""
Bearer token extraction and JWT validation.
"""

import jwt

from videos.service.errors import Unauthenticated

TOKEN_ISSUER = 'tubely-access'
JWT_ALGORITHM = 'HS256'


def get_bearer_token(headers):
    """
    Extract the bearer token from request headers.

    Args:
        headers: Mapping of request headers (case-insensitive, as Django's
            request.headers)

    Returns:
        str: The raw token

    Raises:
        Unauthenticated: If the header is missing or not a bearer credential
    """
    auth_header = headers.get('Authorization') or ''
    scheme, _, token = auth_header.strip().partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise Unauthenticated('Missing or malformed Authorization header')
    return token.strip()


def validate_jwt(token, secret):
    """
    Verify a token's signature, expiry and issuer.

    Returns:
        str: The subject (user id)

    Raises:
        Unauthenticated: If the token is invalid or expired
    """
    if not secret:
        raise Unauthenticated("Couldn't validate JWT", detail='JWT secret not configured')
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={'require': ['exp', 'sub']},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthenticated('Token expired')
    except jwt.InvalidTokenError as e:
        raise Unauthenticated("Couldn't validate JWT", detail=str(e))
    return str(claims['sub'])
