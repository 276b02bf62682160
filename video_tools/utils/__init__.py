"""
Utilities Package for Video Tools.

This package contains small, pure helper functions used across the application.

Modules:
    - format_utils.py: Extension extraction from paths, and human-readable
      formatting of sizes and durations for logging.
    - option_utils.py: Validation of compression options against their legal
      values and the quality-to-CRF resolution.
"""
