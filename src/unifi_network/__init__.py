"""
UniFi Network - Python client for the UniFi Network integration API.

This package wraps the API-key authenticated REST interface exposed by UniFi
Network applications (UDM, UCG, Cloud Key, self-hosted) and returns typed
models for sites, devices, clients and application metadata.

Features:
- Builder-style construction with an immutable, validated configuration
- Transparent offset/limit pagination as lazy, restartable iterables
- Typed pydantic models for every response shape
- A small error taxonomy: transport, API, decode and validation failures
- Configuration via YAML with environment variable overrides
"""

import logging

__version__ = "0.3.0"
__all__ = ["__version__"]

# Silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
