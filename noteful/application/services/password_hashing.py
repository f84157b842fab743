"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from noteful.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted work-factor hashing backed by ``werkzeug.security``.

    Callers enforce the 8..72 character policy before hashing. An unknown
    ``method`` raises ``ValueError`` on construction, not on first use.
    """

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method
        generate_password_hash("method-check", method=method)

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (TypeError, ValueError):
            # Unknown hash method or a digest that is not a string.
            return False
