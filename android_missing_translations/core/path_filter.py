"""Path filters deciding which project entries the discoverer skips."""

import fnmatch
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Union

from ..utils.logging import get_logger

logger = get_logger('core.path_filter')

PathLike = Union[str, Path]


class PathFilter(ABC):
    """Answers whether a path under a working directory is excluded."""

    @abstractmethod
    def is_ignored(self, working_dir: PathLike, path: PathLike) -> bool:
        pass


class NullPathFilter(PathFilter):
    """Ignores nothing."""

    def is_ignored(self, working_dir: PathLike, path: PathLike) -> bool:
        return False


class ExcludePatternFilter(PathFilter):
    """
    Glob-style exclusion on path components.

    A pattern without a slash (``build``, ``*.bak``) matches any single
    component of the path relative to the working directory. A pattern with
    a slash (``app/src/debug``) matches the leading components of that
    relative path. Trailing slashes are ignored, so ``build/`` == ``build``.
    """

    def __init__(self, patterns: Iterable[str]):
        self.patterns: List[str] = [p.strip().rstrip('/') for p in patterns if p and p.strip().rstrip('/')]

    def is_ignored(self, working_dir: PathLike, path: PathLike) -> bool:
        if not self.patterns:
            return False

        try:
            rel_parts = Path(os.path.relpath(path, working_dir)).parts
        except ValueError:
            # different drives on Windows
            return False

        if not rel_parts or rel_parts[0] == '..':
            return False

        for pattern in self.patterns:
            if '/' in pattern:
                pattern_parts = pattern.strip('/').split('/')
                if len(rel_parts) >= len(pattern_parts) and all(
                    fnmatch.fnmatchcase(part, pat) for part, pat in zip(rel_parts, pattern_parts)
                ):
                    return True
            elif any(fnmatch.fnmatchcase(part, pattern) for part in rel_parts):
                return True

        return False


class GitIgnoreFilter(PathFilter):
    """
    Honors ``.gitignore`` rules through ``git check-ignore``.

    One process per call. The check fails open: a timeout, a missing git
    binary, a directory outside a repository or any exit status other than
    0 all mean "not ignored". Once git is found to be missing, later calls
    return immediately.
    """

    def __init__(self, git_executable: str = 'git', timeout: float = 5.0):
        self.git_executable = git_executable
        self.timeout = timeout
        self._git_available = True

    def is_ignored(self, working_dir: PathLike, path: PathLike) -> bool:
        if not self._git_available:
            return False

        try:
            rel_path = os.path.relpath(path, working_dir)
        except ValueError:
            return False

        if Path(rel_path).parts[:1] == ('..',):
            return False

        try:
            result = subprocess.run(
                [self.git_executable, 'check-ignore', '-q', rel_path],
                cwd=str(working_dir),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            logger.warning("git executable '%s' not found, .gitignore rules will not be applied",
                           self.git_executable)
            self._git_available = False
            return False
        except subprocess.TimeoutExpired:
            logger.debug("git check-ignore timed out after %ss for %s", self.timeout, rel_path)
            return False
        except OSError as e:
            logger.debug("git check-ignore failed for %s: %s", rel_path, e)
            return False

        if result.returncode == 0:
            logger.debug("ignored by git: %s", rel_path)
            return True

        return False


class CompositePathFilter(PathFilter):
    """Ignores a path when any member filter does; members run in order."""

    def __init__(self, filters: Iterable[PathFilter]):
        self.filters: List[PathFilter] = list(filters)

    def is_ignored(self, working_dir: PathLike, path: PathLike) -> bool:
        return any(f.is_ignored(working_dir, path) for f in self.filters)
