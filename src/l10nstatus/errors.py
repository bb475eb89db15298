class L10nError(Exception):
    """Base class for errors reported by l10n-status."""


class ConfigurationError(L10nError):
    pass


class BundleLoadError(L10nError):
    """A bundle file could not be read or parsed."""

    def __init__(self, path, reason):
        super().__init__(f"Error loading {path}: {reason}")
        self.path = path
        self.reason = reason


class PseudoLocalizationError(L10nError):
    pass
