"""
Dependency Configuration.

This module wires the concrete path utilities, URL conversion and working
directory provider into the file factory, following the configured settings.
"""

import os
from typing import Optional

from vfile.application.use_cases.create_file import CreateFileUseCase
from vfile.domain.services.i_path_service import IPathService
from vfile.domain.services.i_url_converter import IUrlConverter
from vfile.infrastructure.config.settings import Settings, get_settings
from vfile.infrastructure.path.file_url import FileUrlConverter
from vfile.infrastructure.path.path_service import (
    PosixPathService,
    WindowsPathService,
)


def _uses_windows_paths(settings: Settings) -> bool:
    if settings.path_style == "host":
        return os.name == "nt"
    return settings.path_style == "windows"


def get_path_service(settings: Optional[Settings] = None) -> IPathService:
    settings = settings or get_settings()
    if _uses_windows_paths(settings):
        return WindowsPathService()
    return PosixPathService()


def get_url_converter(settings: Optional[Settings] = None) -> IUrlConverter:
    settings = settings or get_settings()
    return FileUrlConverter(windows=_uses_windows_paths(settings))


def get_create_file_use_case(
    settings: Optional[Settings] = None,
) -> CreateFileUseCase:
    settings = settings or get_settings()
    return CreateFileUseCase(
        path_service=get_path_service(settings),
        url_converter=get_url_converter(settings),
        cwd_provider=os.getcwd,
        default_encoding=settings.default_encoding,
    )
