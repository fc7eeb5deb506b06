from fastapi import APIRouter

from app.dependencies import RegistryDep, SettingsDep, check_text_length
from app.models.schemas import ErrorResponse, FenceRequest, FenceResponse

router = APIRouter()


@router.post(
    "",
    response_model=FenceResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Show the fence",
    description="Lay text out on the rails in its zigzag pattern, as drawn by hand.",
)
async def show_fence(
    request: FenceRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> FenceResponse:
    check_text_length(request.text, settings)
    engine = registry.require_engine(request.cipher_type)

    layout = engine.fence(request.text, request.key)
    return FenceResponse(cipher_type=request.cipher_type, **layout.model_dump())
