"""
Project loading for the HTMLifier
Turns a project source into a normalised in-memory representation
"""

import io
import json
import time
import zipfile
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from ..utils.exceptions import ProjectLoadError
from ..utils.logging_config import LogCallback, get_logger

logger = get_logger('project_loader')


@dataclass(frozen=True)
class AssetsProject:
    """A project split into its project.json descriptor and md5ext-named assets"""
    project: Dict[str, Any]
    assets: Tuple[Tuple[str, bytes], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FileProject:
    """A project kept as a single undecoded file"""
    file: bytes


NormalisedProject = Union[AssetsProject, FileProject]


def decode_project_bytes(data: bytes, log: LogCallback) -> NormalisedProject:
    """
    Decode raw project bytes

    A zip containing a project.json with a ``targets`` list (the sb3 layout) is
    split into the descriptor and its assets. Anything else is passed through as
    an opaque file for the runtime to decode.

    Args:
        data: Raw project file
        log: Conversion log callback

    Returns:
        AssetsProject or FileProject
    """
    if not zipfile.is_zipfile(io.BytesIO(data)):
        log('Project is not an sb3 archive; embedding it as a single file', 'status')
        return FileProject(file=data)

    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
            if 'project.json' not in names:
                log('Archive has no project.json; embedding it as a single file', 'status')
                return FileProject(file=data)

            project = json.loads(archive.read('project.json').decode('utf-8'))
            if not isinstance(project, dict) or 'targets' not in project:
                log('project.json is not in the sb3 format; embedding it as a single file', 'status')
                return FileProject(file=data)

            asset_names = [
                name for name in names
                if name != 'project.json' and not name.endswith('/')
            ]
            assets = []
            for index, name in enumerate(asset_names, start=1):
                assets.append((name, archive.read(name)))
                log(f"Read asset {index}/{len(asset_names)}: {name}", 'progress')

    except (zipfile.BadZipFile, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProjectLoadError(f"Could not decode project archive: {e}")

    log(f"Decoded project with {len(assets)} assets", 'status')
    return AssetsProject(project=project, assets=tuple(assets))


class ProjectLoader(ABC):
    """
    Abstract base class for project loading
    Single responsibility: produce a NormalisedProject from one kind of source
    """

    def __init__(self, source: Any):
        """
        Initialise with the project source

        Args:
            source: Where the project comes from (path, URL, ...)
        """
        self.source = source
        self.logger = get_logger(f'project_loader.{self.__class__.__name__}')

    @abstractmethod
    def read_bytes(self, log: LogCallback) -> bytes:
        """
        Fetch the raw project file

        Args:
            log: Conversion log callback

        Returns:
            Raw project bytes
        """
        pass

    def load_project(self, log: LogCallback) -> NormalisedProject:
        """
        Fetch and decode the project

        Args:
            log: Conversion log callback

        Returns:
            Normalised project
        """
        start_time = time.time()
        log(f"Loading project from {self.source}", 'status')

        data = self.read_bytes(log)
        project = decode_project_bytes(data, log)

        self.logger.info(
            f"Loaded {type(project).__name__} from {self.source} in {time.time() - start_time:.2f}s"
        )
        return project
