import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import ValidationError

from vfile.application.dtos.file_options import PATH_OPTION_ORDER, VFileOptions
from vfile.domain.entities.vfile import BYTES_TYPES, VFile
from vfile.domain.exceptions.domain_exceptions import InvalidOptionsError
from vfile.domain.services.i_path_service import IPathService
from vfile.domain.services.i_url_converter import IUrlConverter
from vfile.domain.value_objects.path_identity import PathIdentity

logger = logging.getLogger(__name__)


@dataclass
class CreateFileUseCase:
    """Use case for building virtual files from the accepted input shapes."""

    path_service: IPathService
    url_converter: IUrlConverter
    cwd_provider: Callable[[], str] = os.getcwd
    default_encoding: str = "utf-8"

    def execute(self, compatible: Any = None) -> VFile:
        """Create a file from nothing, content, a path, options or a file.

        Args:
            compatible: ``None``; text or bytes-like content; a file URL or
                ``os.PathLike`` path; an options mapping or ``VFileOptions``;
                or an existing ``VFile`` to copy

        Returns:
            The new VFile

        Raises:
            VFileError: If an option is malformed or a path option is invalid
        """
        return self.from_options(self.resolve_options(compatible))

    def resolve_options(self, compatible: Any) -> VFileOptions:
        """Turn any accepted input shape into a uniform options record."""
        if isinstance(compatible, VFileOptions):
            return compatible
        if compatible is None:
            shape, options = "empty", VFileOptions()
        elif isinstance(compatible, (str,) + BYTES_TYPES):
            shape, options = "value", VFileOptions(value=compatible)
        elif self.url_converter.is_url(compatible) or isinstance(
            compatible, os.PathLike
        ):
            shape, options = "path", VFileOptions(path=compatible)
        elif isinstance(compatible, VFile):
            shape, options = "file", self._options_from_file(compatible)
        elif isinstance(compatible, Mapping):
            shape, options = "options", self._validate(compatible)
        else:
            # Any other object is content that renders through str().
            shape, options = "value", VFileOptions(value=compatible)

        logger.debug("Resolved %s input into file options", shape)
        return options

    def from_value(self, value: Any) -> VFile:
        return self.from_options(VFileOptions(value=value))

    def from_path(self, path: Any) -> VFile:
        return self.from_options(VFileOptions(path=path))

    def from_file(self, file: VFile) -> VFile:
        return self.from_options(self._options_from_file(file))

    def from_options(self, options: Any) -> VFile:
        """Build a file, applying path options from general to specific."""
        if not isinstance(options, VFileOptions):
            options = self._validate(options)

        identity = PathIdentity(
            self.path_service, self.url_converter, history=options.history
        )
        file = VFile(
            identity=identity,
            cwd=options.cwd if options.cwd is not None else self.cwd_provider(),
            value=options.value,
            data=options.data,
            messages=options.messages,
            stored=options.stored,
            result=options.result,
            map=options.map,
            attributes=options.extras,
            default_encoding=self.default_encoding,
        )

        for key in PATH_OPTION_ORDER[1:]:
            value = getattr(options, key)
            if value is not None:
                setattr(file, key, value)

        return file

    @staticmethod
    def _validate(raw: Mapping) -> VFileOptions:
        try:
            return VFileOptions.model_validate(dict(raw))
        except ValidationError as e:
            raise InvalidOptionsError(f"Invalid file options: {e}") from e

    @staticmethod
    def _options_from_file(file: VFile) -> VFileOptions:
        return VFileOptions(
            value=file.value,
            cwd=file.cwd,
            history=list(file.history),
            data=dict(file.data),
            messages=list(file.messages),
            stored=file.stored,
            result=file.result,
            map=file.map,
            attributes=dict(file.attributes),
        )
