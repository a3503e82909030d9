"""package.json manifest loading and structural validation."""

# Default manifest filename, resolved against the project root
MANIFEST_FILENAME = "package.json"
