"""Utility functions for TodoVault.

Import convention: use module-level imports for clarity.

    from todovault.utils import isodatetime
    timestamp = isodatetime.to_timestamp(isodatetime.utcnow())
"""

from . import isodatetime, rwlock

__all__ = ["isodatetime", "rwlock"]
