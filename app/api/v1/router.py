from fastapi import APIRouter

from app.api.v1.endpoints import ciphers, decrypt, encrypt, fence

api_router = APIRouter()

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    fence.router,
    prefix="/fence",
    tags=["Fence"],
)
