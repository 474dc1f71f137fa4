# CLI package for dynarray
"""
Command line for replaying operation scripts.

Commands:
    dynarray apply  — Apply operations to a fresh container
    dynarray demo   — Replay the built-in walkthrough
"""
