"""Stateless signed tokens for admin sessions and password resets."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..domain.models import SessionClaims

logger = logging.getLogger(__name__)

SESSION_TOKEN_TTL = timedelta(days=7)
RESET_TOKEN_TTL = timedelta(hours=1)
RESET_TOKEN_TYPE = "reset"


class TokenService:
    """Issues and verifies HS256 JWTs signed with a single server-held secret.

    Tokens are self-contained: there is no revocation list, so a token stays
    valid until its ``exp`` claim passes even after the client logs out.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        session_ttl: timedelta = SESSION_TOKEN_TTL,
        reset_ttl: timedelta = RESET_TOKEN_TTL,
    ) -> None:
        if not secret_key:
            raise RuntimeError("SESSION_SECRET is not configured.")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._session_ttl = session_ttl
        self._reset_ttl = reset_ttl

    # Session tokens ------------------------------------------------------
    def issue_session_token(self, claims: SessionClaims) -> str:
        payload = {
            "sub": claims.subject_id,
            "email": claims.email,
            "role": claims.role,
        }
        return self._encode(payload, self._session_ttl)

    def verify_session_token(self, token: str) -> Optional[SessionClaims]:
        payload = self._decode(token)
        if payload is None:
            return None
        if payload.get("type") == RESET_TOKEN_TYPE:
            logger.info("Rejected reset token presented as a session token")
            return None
        subject = payload.get("sub")
        email = payload.get("email")
        role = payload.get("role")
        exp = payload.get("exp")
        if not subject or not isinstance(email, str) or not isinstance(role, str) or exp is None:
            return None
        return SessionClaims(
            subject_id=str(subject),
            email=email,
            role=role,
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )

    # Reset tokens --------------------------------------------------------
    def issue_reset_token(self, subject_id: str) -> str:
        if not subject_id:
            raise ValueError("A reset token must be bound to an administrator.")
        return self._encode({"type": RESET_TOKEN_TYPE, "sub": subject_id}, self._reset_ttl)

    def verify_reset_token(self, token: str) -> bool:
        payload = self._decode(token)
        return payload is not None and payload.get("type") == RESET_TOKEN_TYPE

    def reset_subject(self, token: str) -> Optional[str]:
        payload = self._decode(token)
        if payload is None or payload.get("type") != RESET_TOKEN_TYPE:
            return None
        subject = payload.get("sub")
        return str(subject) if subject else None

    # Helpers -------------------------------------------------------------
    def _encode(self, payload: Dict[str, Any], ttl: timedelta) -> str:
        now = datetime.now(tz=timezone.utc)
        claims = dict(payload)
        claims["iat"] = now
        claims["exp"] = now + ttl
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            return None
