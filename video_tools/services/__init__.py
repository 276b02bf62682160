"""
Services Package for Video Tools.

This package contains the "service layer" of the application: the classes and
functions that talk to the outside world or coordinate domain logic.

- **Asset handle (`VideoTools`):**
  Owns one media file. Validates compression requests, resolves the output path,
  builds and runs the compression command, and caches probe results.

- **Engine (`FFmpegEngine`):**
  Runs FFmpeg and ffprobe through a single, process-wide execution slot and
  supports cancelling the running command.

- **Command builder:**
  Assembles the ordered argument pairs of compression and probe commands.

- **Cache manager (`generate_file`):**
  Reserves output file names in the scratch directory.
"""
