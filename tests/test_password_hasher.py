import base64
import hashlib
from infrastructure.services.password_hasher import Sha256PasswordHasher


hasher = Sha256PasswordHasher()


def test_salt_is_16_random_bytes():
    salt = hasher.generate_salt()
    assert len(base64.b64decode(salt)) == 16
    assert salt != hasher.generate_salt()


def test_hash_is_sha256_of_salt_then_password():
    salt = base64.b64encode(bytes(range(16))).decode('ascii')
    expected = base64.b64encode(hashlib.sha256(bytes(range(16)) + 'pässword'.encode('utf-8')).digest()).decode('ascii')
    assert hasher.hash_password('pässword', salt) == expected


def test_same_password_different_salts():
    assert hasher.hash_password('pw1', hasher.generate_salt()) != hasher.hash_password('pw1', hasher.generate_salt())


def test_verify():
    salt = hasher.generate_salt()
    password_hash = hasher.hash_password('secret', salt)
    assert hasher.verify('secret', salt, password_hash)
    assert not hasher.verify('secreT', salt, password_hash)
    assert not hasher.verify('secret', hasher.generate_salt(), password_hash)
