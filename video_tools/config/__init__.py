"""
Configuration Package for Video Tools.

This package centralizes the static configuration settings for the application.
By separating configuration from the application logic, parameters can be changed
without touching the core code.

This package includes settings for:
- Common application settings like logging formats, the scratch directory and
  the user-facing error messages.
- User-overridable paths for external tools like FFmpeg, loaded from
  'config.user.yaml'.
- Video compression parameters: codec, command flags and the quality-to-CRF table.
"""
