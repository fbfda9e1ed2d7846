from .create_firm import CreateFirmUseCase
from .delete_firm import DeleteFirmUseCase

__all__ = [
    "CreateFirmUseCase",
    "DeleteFirmUseCase",
]
