"""Persistent bot configuration.

Holds the channel-enablement list behind a small store interface so the
orchestration layer receives configuration as an explicit value instead of
reading and writing a shared file directly.
"""
