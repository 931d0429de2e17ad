"""bedrock_providers.config.defaults
==================================

Stable default values for the Bedrock adapter. Environment variables and the
optional external config file override them; nothing here performs I/O.
"""

from __future__ import annotations

# ---- Routing ----
BEDROCK_DEFAULT_REGION = "us-east-1"
BEDROCK_DEFAULT_MODEL = "anthropic.claude-3-sonnet-20240229-v1:0"
BEDROCK_ENDPOINT_TEMPLATE = "https://bedrock-runtime.{region}.amazonaws.com"

# ---- Request shape ----
# Protocol marker required by Anthropic models hosted on Bedrock.
BEDROCK_ANTHROPIC_VERSION = "bedrock-2023-05-31"
BEDROCK_DEFAULT_CONTEXT_LENGTH = 200_000
BEDROCK_DEFAULT_MAX_TOKENS = 4096
BEDROCK_IMAGE_MEDIA_TYPE = "image/jpeg"

# ---- Credentials ----
# Profile names tried in order when selecting credentials.
BEDROCK_PREFERRED_PROFILE = "bedrock"
BEDROCK_FALLBACK_PROFILE = "default"
CREDENTIALS_RELATIVE_PATH = (".aws", "credentials")

# ---- Streaming ----
# Deltas buffered between the network reader thread and the consumer.
STREAM_CHANNEL_CAPACITY = 16

__all__ = [
    "BEDROCK_DEFAULT_REGION",
    "BEDROCK_DEFAULT_MODEL",
    "BEDROCK_ENDPOINT_TEMPLATE",
    "BEDROCK_ANTHROPIC_VERSION",
    "BEDROCK_DEFAULT_CONTEXT_LENGTH",
    "BEDROCK_DEFAULT_MAX_TOKENS",
    "BEDROCK_IMAGE_MEDIA_TYPE",
    "BEDROCK_PREFERRED_PROFILE",
    "BEDROCK_FALLBACK_PROFILE",
    "CREDENTIALS_RELATIVE_PATH",
    "STREAM_CHANNEL_CAPACITY",
]
