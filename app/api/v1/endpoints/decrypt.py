import logging

from fastapi import APIRouter

from app.dependencies import RegistryDep, SettingsDep, check_text_length
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """Decrypt ciphertext with a known key."""
    check_text_length(request.ciphertext, settings)
    engine = registry.require_engine(request.cipher_type)

    result = engine.decrypt_with_key(request.ciphertext, request.key)
    logger.info("Decrypted %d characters with %s", len(request.ciphertext), request.cipher_type.value)

    return DecryptResponse(
        plaintext=result.plaintext,
        confidence=result.confidence,
        key_used=result.key,
        explanation=result.explanation,
    )
