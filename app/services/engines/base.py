from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from app.models.schemas import CipherFamily, CipherInfo, CipherType, FenceLayout


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: str | dict[str, Any]
    confidence: float
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt_with_key(): Decrypt with a known key
    - generate_random_key(): Produce a usable key
    - validate_key(): Check a key without using it
    - explain(): Generate human-readable explanation
    - fence(): Lay text out the way the cipher arranges it
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    @abstractmethod
    def encrypt(
        self,
        plaintext: str,
        key: int | str | dict[str, Any],
    ) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt_with_key(
        self,
        ciphertext: str,
        key: int | str | dict[str, Any],
    ) -> DecryptionResult:
        """
        Decrypt with a known key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            DecryptionResult with plaintext and metadata
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> str | dict[str, Any]:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def validate_key(self, key: int | str | dict[str, Any]) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        pass

    @abstractmethod
    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: int | str | dict[str, Any],
    ) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The original ciphertext
            plaintext: The decrypted plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass

    @abstractmethod
    def fence(
        self,
        text: str,
        key: int | str | dict[str, Any],
    ) -> FenceLayout:
        """
        Lay text out on the cipher's grid without reading it off.

        Args:
            text: The text to lay out
            key: The key used

        Returns:
            FenceLayout with one row per rail
        """
        pass

    def info(self) -> CipherInfo:
        """Describe this engine."""
        return CipherInfo(
            name=self.name,
            cipher_type=self.cipher_type,
            cipher_family=self.cipher_family,
            description=self.description,
        )
