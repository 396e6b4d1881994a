"""
Adapter package for calling the supported LLM providers.

Each provider has its own adapter implementation in this directory, all
conforming to the ProviderAdapter interface defined in base_adapter.py.
"""
