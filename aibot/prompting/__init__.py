"""Prompting package.

Deterministic prompt-construction helpers used by the text-generation service.
It does not perform routing, network calls, or fallback handling.
"""
