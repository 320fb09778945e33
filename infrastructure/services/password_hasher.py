import base64
import hashlib
import hmac
import secrets
from app.domain.services_interfaces.password_hasher import PasswordHasherInterface


SALT_BYTES = 16


class Sha256PasswordHasher(PasswordHasherInterface):
    """SHA-256 over the raw salt bytes followed by the UTF-8 password, base64 encoded."""

    def generate_salt(self) -> str:
        return base64.b64encode(secrets.token_bytes(SALT_BYTES)).decode('ascii')

    def hash_password(self, password: str, salt: str) -> str:
        digest = hashlib.sha256()
        digest.update(base64.b64decode(salt))
        digest.update(password.encode('utf-8'))
        return base64.b64encode(digest.digest()).decode('ascii')

    def verify(self, password: str, salt: str, password_hash: str) -> bool:
        return hmac.compare_digest(self.hash_password(password, salt), password_hash)
