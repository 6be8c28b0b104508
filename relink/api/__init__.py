"""API module for relink.

Functions defined here are the single source of truth for the CLI commands.
Each ``cmd_*`` function returns a StageResult whose progress callback does the work.
"""

__all__ = []
