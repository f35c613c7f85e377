class RipplesError(Exception):
    """Base class for all errors raised by the ripples package."""


class InitializationError(RipplesError):
    """The viewport could not be brought up (context, shaders, GL calls)."""


class TextureLoadError(RipplesError):
    """A matcap image could not be fetched or decoded."""
