"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .credential_source import CredentialSource
from .has_default_model import HasDefaultModel
from .llm_provider import LLMProvider
from .supports_streaming import SupportsStreaming

__all__ = ["CredentialSource", "HasDefaultModel", "LLMProvider", "SupportsStreaming"]
