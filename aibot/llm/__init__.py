"""LLM access package.

Architectural role:
    Provides provider configuration, request-payload construction, and the
    transport adapter used by orchestration to call the text-generation model.

Module split:
    - `provider_config`: environment-driven model, endpoint and key settings.
    - `service`: chat and translation entrypoints.
    - `client`: Gemini HTTP transport and response parsing.
"""
