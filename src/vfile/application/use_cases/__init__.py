from .create_file import CreateFileUseCase

__all__ = [
    "CreateFileUseCase",
]
