"""Generation request/result data models."""
from pydantic import BaseModel, ConfigDict


class CompiledPrompt(BaseModel):
    """Output of the prompt compiler: what gets dispatched to a provider."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    seed: int
    aspect_ratio: str = "16:9"


class GenerationResult(BaseModel):
    """Normalized success value returned by every provider adapter.

    `url` is either a `data:` URI or a remote locator; `prompt` is the exact
    text that was sent.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    prompt: str
