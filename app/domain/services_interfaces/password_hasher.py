from abc import ABC, abstractmethod


class PasswordHasherInterface(ABC):
    @abstractmethod
    def generate_salt(self) -> str:
        """
        Generates a new random salt for a user.

        :return: The salt encoded as text so it can be stored next to the hash
        """
        pass

    @abstractmethod
    def hash_password(self, password: str, salt: str) -> str:
        """
        Computes the digest of the password with the given salt.

        :param password: The cleartext password
        :param salt: The encoded salt returned by generate_salt
        :return: The encoded digest
        """
        pass

    @abstractmethod
    def verify(self, password: str, salt: str, password_hash: str) -> bool:
        """
        Checks the password against a stored digest.

        :param password: The cleartext password to check
        :param salt: The stored salt
        :param password_hash: The stored digest
        :return: True if the password hashes to the stored digest
        """
        pass
