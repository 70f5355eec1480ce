"""Verification cycle utilities.

Responsibilities:
  - Provide the retry/escalation cycle, its result type and the tick gate.
  - Must not touch hardware directly; readings arrive through an injected callable.
"""
