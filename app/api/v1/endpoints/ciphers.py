from fastapi import APIRouter

from app.dependencies import RegistryDep
from app.models.schemas import CipherFamily, CipherInfo

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered cipher engines, optionally limited to one cipher family.",
)
async def list_ciphers(
    registry: RegistryDep,
    family: CipherFamily | None = None,
) -> list[CipherInfo]:
    if family is None:
        engines = registry.get_all_engines()
    else:
        engines = registry.get_engines_by_family(family)
    return [engine.info() for engine in engines]
