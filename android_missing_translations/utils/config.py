"""Configuration management for the translation checker."""

import re
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple
from dataclasses import dataclass, field, fields


CONFIG_FILE_NAME = '.translations.yml'

VALID_FORMATS = ['json', 'markdown']


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project configuration."""
    dir: str = "."


@dataclass
class PathsConfig:
    """Paths configuration."""
    exclude: List[str] = field(default_factory=lambda: ['.git'])


@dataclass
class GitConfig:
    """.gitignore handling."""
    respect_ignore: bool = True
    timeout: float = 5.0  # seconds per git check-ignore call


@dataclass
class LocalesConfig:
    """Locale configuration."""
    # values-* qualifiers that are not locales, e.g. night, land, v21
    ignore: List[str] = field(default_factory=list)


@dataclass
class ReportConfig:
    """Report configuration."""
    format: str = "json"  # json | markdown
    markdown_title: str = "Missing Translations"
    output: str = ""  # empty: stdout


def _section(section_cls, data: Optional[Dict[str, Any]], name: str):
    """Build a section dataclass, rejecting unknown keys."""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigValidationError([f"'{name}' must be a mapping"])

    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigValidationError([f"Unknown key(s) in '{name}': {', '.join(unknown)}"])

    return section_cls(**data)


@dataclass
class Config:
    """Main configuration class."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    git: GitConfig = field(default_factory=GitConfig)
    locales: LocalesConfig = field(default_factory=LocalesConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from YAML file.

        Without an explicit path, ``.translations.yml`` in the current
        directory is used when present, defaults otherwise.

        Raises:
            ConfigValidationError: On YAML syntax errors or unknown keys
        """
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError([f"Invalid YAML in {config_path}: {e}"]) from e
        except OSError as e:
            raise ConfigValidationError([f"Cannot read {config_path}: {e}"]) from e

        if not isinstance(data, dict):
            raise ConfigValidationError([f"{config_path} must contain a mapping"])

        config = cls(
            project=_section(ProjectConfig, data.get('project'), 'project'),
            paths=_section(PathsConfig, data.get('paths'), 'paths'),
            git=_section(GitConfig, data.get('git'), 'git'),
            locales=_section(LocalesConfig, data.get('locales'), 'locales'),
            report=_section(ReportConfig, data.get('report'), 'report'),
        )

        # before command-line overrides extend the lists
        type_errors = config.type_errors()
        if type_errors:
            raise ConfigValidationError(type_errors)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'project': {
                'dir': self.project.dir,
            },
            'paths': {
                'exclude': self.paths.exclude,
            },
            'git': {
                'respect_ignore': self.git.respect_ignore,
                'timeout': self.git.timeout,
            },
            'locales': {
                'ignore': self.locales.ignore,
            },
            'report': {
                'format': self.report.format,
                'markdown_title': self.report.markdown_title,
                'output': self.report.output,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = self.type_errors()
        warnings = []

        if errors:
            if raise_on_error:
                raise ConfigValidationError(errors)
            return errors, warnings

        if self.report.format not in VALID_FORMATS:
            errors.append(
                f"Invalid report format '{self.report.format}'. "
                f"Valid options: {', '.join(VALID_FORMATS)}"
            )

        if not self.report.markdown_title.strip():
            errors.append("report.markdown_title cannot be empty")

        timeout = self.git.timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            errors.append(f"git.timeout must be a positive number, got {self.git.timeout!r}")

        if not Path(self.project.dir).is_dir():
            warnings.append(ConfigValidationWarning(
                f"Project directory does not exist: {self.project.dir}"
            ))

        for code in self.locales.ignore:
            if not self._is_valid_qualifier(code):
                warnings.append(ConfigValidationWarning(
                    f"Ignored locale '{code}' does not look like a values-* qualifier"
                ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings

    def type_errors(self) -> List[str]:
        """Values whose YAML type cannot be used at all, e.g. ``ignore: de`` instead of a list."""
        errors = []

        for key, value in (
            ('project.dir', self.project.dir),
            ('report.format', self.report.format),
            ('report.markdown_title', self.report.markdown_title),
            ('report.output', self.report.output),
        ):
            if not isinstance(value, str):
                errors.append(f"{key} must be a string, got {value!r}")

        for key, value in (
            ('paths.exclude', self.paths.exclude),
            ('locales.ignore', self.locales.ignore),
        ):
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                errors.append(f"{key} must be a list of strings, got {value!r}")

        if not isinstance(self.git.respect_ignore, bool):
            errors.append(f"git.respect_ignore must be true or false, got {self.git.respect_ignore!r}")

        return errors

    @staticmethod
    def _is_valid_qualifier(code: str) -> bool:
        """
        Check if a string looks like a resource directory qualifier.

        Accepts forms such as ``fr``, ``zh-rCN``, ``b+sr+Latn``, ``night``
        or ``v21``.
        """
        if not code or not isinstance(code, str):
            return False
        return re.fullmatch(r'[A-Za-z0-9+]+(-[A-Za-z0-9+]+)*', code) is not None


# Non-locale values-* directories commonly found next to strings.xml
COMMON_NON_LOCALE_QUALIFIERS = [
    'night', 'notnight', 'land', 'port',
    'v21', 'v23', 'v26', 'v27', 'v28', 'v29', 'v30', 'v31',
    'sw600dp', 'sw720dp', 'w820dp',
]


def create_default_config(ignore_common_qualifiers: bool = True) -> Config:
    """
    Create the configuration written by ``init``.

    Args:
        ignore_common_qualifiers: Pre-fill locales.ignore with night, land, v21, ...
    """
    config = Config()
    if ignore_common_qualifiers:
        config.locales.ignore = list(COMMON_NON_LOCALE_QUALIFIERS)
    return config
