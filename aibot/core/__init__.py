"""Core orchestration package.

Architectural role:
    Sits between the chat-platform adapter (`aibot.api`) and the lower-level
    subsystems (fallback responder, text/image generation, channel storage).

Composition:
    - `engine`: message handling and `/ai` sub-command behavior.
    - `routing_types`: fallback decision schema produced by the NLP router.

Determinism and side effects:
    Package import is side-effect free. Network and file I/O happen inside
    `engine` calls only.
"""
