"""Rule-based language utilities for the fallback responder.

Module scope:
- Arabic letter-variant normalization (`normalizer`).
- Static intent category table (`categories`).
- Pattern matching and question detection (`intent_router`).
- Reply selection and the three-tier fallback entrypoint (`fallback`).

Determinism profile:
- Everything except reply selection is deterministic. Reply selection draws
  from an injected random source.
"""
