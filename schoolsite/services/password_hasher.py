"""One-way salted password hashing for administrator credentials."""

from passlib.context import CryptContext

DEFAULT_ROUNDS = 12


class PasswordHasher:
    """bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, plaintext: str) -> str:
        """Return a freshly salted hash; two calls never yield the same string."""
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True iff ``plaintext`` matches ``hashed``. A mismatch is not an error."""
        return bool(self._context.verify(plaintext, hashed))
