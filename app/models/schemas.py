from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictInt


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    RAIL_FENCE = "rail_fence"


# ============================================================================
# Cipher Schemas
# ============================================================================


class FenceLayout(BaseModel):
    """Text laid out on the rails of a fence."""

    rails: int = Field(ge=1)
    rail_lengths: list[int]
    rows: list[str]
    ciphertext: str


class CipherInfo(BaseModel):
    """Metadata describing a registered cipher engine."""

    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str


# ============================================================================
# Request Schemas
# ============================================================================

KeyType = StrictInt | str | dict[str, Any]


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType = CipherType.RAIL_FENCE
    key: KeyType | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType = CipherType.RAIL_FENCE
    key: KeyType


class FenceRequest(BaseModel):
    """Request schema for /fence endpoint."""

    text: str
    cipher_type: CipherType = CipherType.RAIL_FENCE
    key: KeyType


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: KeyType


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    confidence: float
    key_used: KeyType
    explanation: str


class FenceResponse(FenceLayout):
    """Response schema for /fence endpoint."""

    cipher_type: CipherType


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
