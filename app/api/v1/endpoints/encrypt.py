import logging

from fastapi import APIRouter

from app.dependencies import RegistryDep, SettingsDep, check_text_length
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type. A random key is used when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The plaintext is used exactly as given; no case folding or stripping.
    """
    check_text_length(request.plaintext, settings)
    engine = registry.require_engine(request.cipher_type)

    # Generate key if not provided
    key = request.key
    if key is None:
        key = engine.generate_random_key()

    ciphertext = engine.encrypt(request.plaintext, key)
    logger.info("Encrypted %d characters with %s", len(request.plaintext), request.cipher_type.value)

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=key,
    )
