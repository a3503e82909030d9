"""Exception types raised by the glue layer."""


class ReadmeSyncError(Exception):
    """Base class for readme-sync failures."""


class ManifestError(ReadmeSyncError):
    """The manifest is readable JSON but not a usable package.json."""


class ConfigError(ReadmeSyncError):
    """The .readme-sync.yaml file is malformed or names unknown settings."""
