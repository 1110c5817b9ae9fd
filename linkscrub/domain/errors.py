######## errors.py
########


class PipelineError(Exception):
    """
    Base for every failure the cleaning pipeline reports back to the user.
    Subclasses carry a static, user-facing message; exception text stays in the logs.
    """
    user_message = "Something went wrong while processing the link."


class EmptyInputError(PipelineError):
    user_message = "Please enter some text."


class NoUrlFoundError(PipelineError):
    user_message = "No link was found in the text."


class ResolutionError(PipelineError):
    user_message = "Could not resolve the link. Please check that it is valid."

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to resolve {url}: {reason}" if reason else f"Failed to resolve {url}")
