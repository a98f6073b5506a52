"""Command-line interface for android-missing-translations."""

import sys
import argparse
from pathlib import Path
from typing import Optional

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import (
    CONFIG_FILE_NAME,
    VALID_FORMATS,
    Config,
    ConfigValidationError,
    create_default_config,
)
from .utils.github import set_github_output
from .utils.logging import configure_logging, get_logger
from .core.errors import TranslationCheckError
from .core.analyzer import TranslationChecker
from .core.path_filter import CompositePathFilter, ExcludePatternFilter, GitIgnoreFilter
from .reports.json_reporter import JSONReporter
from .reports.markdown_reporter import MarkdownReporter
from .reports.console_reporter import ConsoleReporter

logger = get_logger('cli')


def load_and_validate_config(
    config_path: Optional[Path] = None,
    args: Optional[argparse.Namespace] = None,
    verbose: bool = False
) -> Config:
    """
    Load configuration, apply command-line overrides and validate it.

    Args:
        config_path: Explicit config file, ``.translations.yml`` in cwd otherwise
        args: Parsed ``check`` arguments whose given values win over the file
        verbose: Whether to log warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If loading or validation fails
    """
    config = Config.from_file(config_path)
    if args is not None:
        config = apply_overrides(config, args)

    errors, warnings = config.validate()

    if verbose:
        for warning in warnings:
            logger.warning("config: %s", warning)

    if errors:
        raise ConfigValidationError(errors)

    return config


def apply_overrides(config: Config, args) -> Config:
    """Copy command-line values that were given over the loaded config."""
    if args.project_dir is not None:
        config.project.dir = args.project_dir
    if args.output_format is not None:
        config.report.format = args.output_format
    if args.markdown_title is not None:
        config.report.markdown_title = args.markdown_title
    if args.output is not None:
        config.report.output = args.output
    if args.no_gitignore:
        config.git.respect_ignore = False
    if args.exclude:
        config.paths.exclude = list(config.paths.exclude or []) + list(args.exclude)
    if args.ignore_locale:
        config.locales.ignore = list(config.locales.ignore or []) + list(args.ignore_locale)
    return config


def build_path_filter(config: Config) -> CompositePathFilter:
    """Exclude patterns first, then .gitignore rules when enabled."""
    filters = [ExcludePatternFilter(config.paths.exclude or [])]
    if config.git.respect_ignore:
        filters.append(GitIgnoreFilter(timeout=config.git.timeout))
    return CompositePathFilter(filters)


def render_report(config: Config, records) -> str:
    if config.report.format == 'markdown':
        return MarkdownReporter.render(records, title=config.report.markdown_title)
    return JSONReporter.render(records)


def cmd_check(args):
    """Check the project for missing translations."""
    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=Path(args.log_file) if args.log_file else None,
        use_colors=Colors.enabled and sys.stderr.isatty(),
    )

    try:
        config = load_and_validate_config(
            config_path=Path(args.config) if args.config else None,
            args=args,
            verbose=args.verbose,
        )
    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(error)
        return 1

    checker = TranslationChecker(
        root=Path(config.project.dir),
        path_filter=build_path_filter(config),
        ignored_locales=config.locales.ignore or [],
    )

    try:
        result = checker.run()
    except TranslationCheckError as e:
        logger.error(str(e))
        return 1

    output = render_report(config, result.missing_translations)

    if args.github_actions:
        set_github_output('report', output)

    if config.report.output:
        output_path = Path(config.report.output)
        if config.report.format == 'markdown':
            MarkdownReporter.generate(result.missing_translations, output_path,
                                      title=config.report.markdown_title)
        else:
            JSONReporter.generate(result.missing_translations, output_path)
    else:
        print(output)

    if args.summary:
        ConsoleReporter.print_summary(result)

    if args.fail_on_missing and result.has_missing:
        logger.error("%d string(s) are missing translations", len(result.missing_translations))
        return 1

    return 0


def cmd_init(args):
    """Initialize configuration file."""
    configure_logging(use_colors=Colors.enabled and sys.stderr.isatty())

    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        logger.error("Config already exists: %s (use --force to overwrite)", config_path)
        return 1

    config = create_default_config(ignore_common_qualifiers=not args.no_common_qualifiers)
    config.save(config_path)

    logger.info("%s Created: %s", Colors.success('✓'), config_path)
    logger.info("Next: edit %s, then run: android-missing-translations check", CONFIG_FILE_NAME)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='android-missing-translations',
        description='Report strings that are missing from translated Android resource sets',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # check command
    check_parser = subparsers.add_parser('check', help='Report missing translations')
    check_parser.add_argument('--project-dir', metavar='DIR',
                              help="Android project's root directory (default: .)")
    check_parser.add_argument('--output-format', choices=VALID_FORMATS,
                              help='Output format (default: json)')
    check_parser.add_argument('--markdown-title', metavar='TITLE',
                              help='Title for the Markdown content (default: Missing Translations)')
    check_parser.add_argument('--github-actions', action='store_true',
                              help="Also publish the report as the step's 'report' output")
    check_parser.add_argument('--output', '-o', metavar='PATH', help='Write the report to a file')
    check_parser.add_argument('--no-gitignore', action='store_true',
                              help='Do not skip paths ignored by git')
    check_parser.add_argument('--exclude', '-e', metavar='PATTERN', action='append',
                              help='Skip paths matching PATTERN (repeatable)')
    check_parser.add_argument('--ignore-locale', metavar='CODE', action='append',
                              help='Leave a values-CODE set out of the comparison (repeatable)')
    check_parser.add_argument('--fail-on-missing', action='store_true',
                              help='Exit with status 1 if any translation is missing')
    check_parser.add_argument('--summary', action='store_true',
                              help='Print a per-locale summary to stderr')
    check_parser.add_argument('--config', '-c', metavar='PATH',
                              help=f'Config file (default: ./{CONFIG_FILE_NAME} if present)')
    check_parser.add_argument('--log-file', metavar='PATH', help='Also write debug logs to a file')
    check_parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    check_parser.add_argument('--quiet', '-q', action='store_true', help='Only show warnings and errors')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')
    init_parser.add_argument('--no-common-qualifiers', action='store_true',
                             help='Do not pre-fill locales.ignore with night, land, v21, ...')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'check':
        return cmd_check(args)
    elif args.command == 'init':
        return cmd_init(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
