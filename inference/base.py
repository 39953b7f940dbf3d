from abc import ABC, abstractmethod
from .types import ModelRequest, ModelResponse


class ModelBackend(ABC):
    """
    Abstract model boundary.
    Extraction code must depend ONLY on this interface.
    """

    @abstractmethod
    def generate(self, request: ModelRequest) -> ModelResponse:
        """
        Run one chat completion.

        Raises a GenerationError subclass (or lets a transport exception
        through) when the provider cannot produce a reply.
        """
        raise NotImplementedError
