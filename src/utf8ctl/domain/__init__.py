"""Domain layer — the UTF-8 codec itself.

Pure functions over bytes, codepoints, and UTF-16 code units.
This layer depends only on the stdlib.
It must never import from services, config, output, or commands.
"""
