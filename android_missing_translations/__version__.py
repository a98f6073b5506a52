"""Version information for android-missing-translations."""

__version__ = "2.0.0"
__author__ = "Ashutosh Gangwar"
__description__ = "Report strings missing from translated Android resource sets"

# Changelog:
# 2.0.0 - Python rewrite
#       - Locale resolution, parsing and discovery split into testable units
#       - Report records sorted by name, missing locales sorted
#       - Empty locale resource files now count as locales
#       - git check-ignore calls are bounded by a timeout and fail open
#       - New .translations.yml config file and 'init' command
#       - Exclude patterns and ignored locales
#       - --fail-on-missing exit code for CI
#       - GITHUB_OUTPUT file support (legacy ::set-output kept as fallback)
#
# 1.0.0 - Initial release
#       - JSON and Markdown output
#       - GitHub Actions output variable
