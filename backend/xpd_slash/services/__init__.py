"""Services Layer — command handlers, target resolution, queries, and dispatch.

Invariants:
    - Handlers split by command (few methods each)
    - Command dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per command family for locality
"""
