"""Exception hierarchy raised by the generation and build services."""


class SitePipelineError(Exception):
    """Base class for every error the pipeline reports to its caller."""


class SiteGenerationError(SitePipelineError):
    """Generation failed; ``__cause__`` holds the underlying error, if any."""


class SiteValidationError(SiteGenerationError):
    """The site description is malformed.  Raised before anything is written."""


class SiteBuildError(SitePipelineError):
    """The build failed or the requested site does not exist."""


class RenderError(SitePipelineError):
    """The template engine could not render a page."""
