from .mistral import MistralClient

__all__ = ["MistralClient"]
