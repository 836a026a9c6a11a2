"""
Shared pytest fixtures for all tests.
"""

import pytest

from vfile.application.use_cases.create_file import CreateFileUseCase
from vfile.domain.entities.vfile import VFile
from vfile.domain.value_objects.path_identity import PathIdentity
from vfile.infrastructure.config.settings import get_settings
from vfile.infrastructure.path.file_url import FileUrlConverter
from vfile.infrastructure.path.path_service import (
    PosixPathService,
    WindowsPathService,
)


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def posix_paths() -> PosixPathService:
    return PosixPathService()


@pytest.fixture
def windows_paths() -> WindowsPathService:
    return WindowsPathService()


@pytest.fixture
def url_converter() -> FileUrlConverter:
    return FileUrlConverter()


@pytest.fixture
def windows_url_converter() -> FileUrlConverter:
    return FileUrlConverter(windows=True)


# ============================================================================
# Value Object Fixtures
# ============================================================================


@pytest.fixture
def identity(posix_paths, url_converter) -> PathIdentity:
    return PathIdentity(posix_paths, url_converter)


@pytest.fixture
def script_identity(posix_paths, url_converter) -> PathIdentity:
    return PathIdentity(posix_paths, url_converter, history=["/a/b/index.min.js"])


@pytest.fixture
def root_identity(posix_paths, url_converter) -> PathIdentity:
    return PathIdentity(posix_paths, url_converter, history=["/a.js"])


# ============================================================================
# Use Case / Entity Fixtures
# ============================================================================


@pytest.fixture
def use_case(posix_paths, url_converter) -> CreateFileUseCase:
    return CreateFileUseCase(
        path_service=posix_paths,
        url_converter=url_converter,
        cwd_provider=lambda: "/work",
    )


@pytest.fixture
def empty_file(use_case) -> VFile:
    return use_case.execute()


@pytest.fixture
def script_file(use_case) -> VFile:
    return use_case.execute({"path": "/a/b.js", "value": "alert(1)"})


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

