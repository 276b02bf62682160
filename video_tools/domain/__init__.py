"""
This package contains the core domain models of Video Tools.

The domain layer represents the fundamental concepts of the compression façade
(quality levels, presets, options and probe results) independently of the
engine and the scratch-file storage.

Modules:
    enums.py: Closed `Quality` and `Preset` enumerations with their legal values.
    exceptions.py: Custom exception types for each distinct failure of the
                   compression and probe workflows.
    media.py: Value objects: `CompressionOptions`, `MediaDetails` and the small
              result tuples returned by `VideoTools`.
"""
