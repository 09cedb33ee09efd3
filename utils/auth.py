"""
Request Authentication

Resolves the calling user for every authenticated endpoint:

1. An Auth0 bearer token. By default only the payload is decoded and its
   exp/aud/iss/sub claims are checked. The signature is NOT verified unless
   AUTH_VERIFY_SIGNATURE is enabled, in which case the token is checked
   against the tenant's published JWKS.
2. The X-User-Id header, used by local development and older clients.

A token that fails its checks is not an error by itself: the request falls
through to the header. Only a request with neither yields 401.
"""

import logging
import time
from collections import namedtuple

import jwt
from flask import current_app, g, request

from .errors import AuthenticationError

logger = logging.getLogger(__name__)

USER_ID_HEADER = 'X-User-Id'

AuthResult = namedtuple('AuthResult', ['user_id', 'is_valid', 'error'])


def _failed(error):
    return AuthResult(None, False, error)


def _audience_matches(claim, audience):
    if isinstance(claim, (list, tuple)):
        return audience in claim
    return claim == audience


def _verified_payload(token, domain, audience):
    """Decode with full signature, audience and issuer verification."""
    jwks_client = jwt.PyJWKClient(f'https://{domain}/.well-known/jwks.json')
    signing_key = jwks_client.get_signing_key_from_jwt(token)
    return jwt.decode(
        token,
        signing_key.key,
        algorithms=['RS256'],
        audience=audience,
        issuer=f'https://{domain}/',
    )


def verify_token(token, domain, audience, verify_signature=False, now=None):
    """
    Check an Auth0 access token and extract the user id (the `sub` claim).

    Args:
        token: Raw token, with or without the 'Bearer ' prefix
        domain: Auth0 tenant domain, e.g. 'example.eu.auth0.com'
        audience: Expected API audience
        verify_signature: Verify against the tenant JWKS instead of only decoding
        now: Current unix time (for tests)

    Returns:
        AuthResult(user_id, is_valid, error)
    """
    if not token:
        return _failed('No token provided')

    token = token.strip()
    if token.lower().startswith('bearer '):
        token = token[7:].strip()

    if not domain or not audience:
        return _failed('Auth0 not configured')

    if token.count('.') != 2:
        return _failed('Invalid token format')

    try:
        if verify_signature:
            payload = _verified_payload(token, domain, audience)
        else:
            payload = jwt.decode(token, options={'verify_signature': False})
    except jwt.ExpiredSignatureError:
        return _failed('Token expired')
    except jwt.PyJWKClientError as e:
        return _failed(f'Signing key unavailable: {e}')
    except jwt.InvalidTokenError as e:
        return _failed(f'Token decode failed: {e}')

    if now is None:
        now = time.time()

    exp = payload.get('exp')
    if exp is not None:
        try:
            if float(exp) < now:
                return _failed('Token expired')
        except (TypeError, ValueError):
            return _failed('Invalid token expiry')

    aud = payload.get('aud')
    if aud and not _audience_matches(aud, audience):
        return _failed('Invalid audience')

    iss = payload.get('iss')
    if iss and domain not in str(iss):
        return _failed('Invalid issuer')

    user_id = payload.get('sub')
    if not user_id:
        return _failed('No user ID in token')

    return AuthResult(str(user_id), True, None)


def authenticate_request(req=None):
    """Try the bearer token first, then the X-User-Id header."""
    req = req or request
    config = current_app.config

    auth_header = req.headers.get('Authorization')
    if auth_header:
        result = verify_token(
            auth_header,
            config.get('AUTH0_DOMAIN'),
            config.get('AUTH0_AUDIENCE'),
            verify_signature=config.get('AUTH_VERIFY_SIGNATURE', False),
        )
        if result.is_valid:
            return result
        logger.warning("JWT validation failed, falling back to header-based auth: %s", result.error)

    user_id = (req.headers.get(USER_ID_HEADER) or '').strip()
    if user_id:
        return AuthResult(user_id, True, None)

    return _failed('No valid authentication provided')


def require_auth():
    """
    before_request hook for blueprints that need a user.

    Preflight requests pass through untouched so CORS can answer them.
    On success the user id is stored on flask.g.user_id.
    """
    if request.method == 'OPTIONS':
        return None

    result = authenticate_request()
    if not result.is_valid or not result.user_id:
        raise AuthenticationError(result.error or 'Authentication required')

    g.user_id = result.user_id
    return None


def current_user_id():
    """The authenticated caller; only valid behind require_auth."""
    return g.user_id
