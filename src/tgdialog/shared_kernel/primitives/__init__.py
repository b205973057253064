"""
Shared Kernel primitives.

This package re-exports the minimal set of peer primitives so that other
modules can import them from one place:

    from tgdialog.shared_kernel.primitives import PeerKind, PeerRef, is_safe_integer
"""

from .peer_kind import PeerKind
from .peer_ref import PeerRef
from .safe_integer import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, is_safe_integer, to_safe_integer

__all__ = [
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "PeerKind",
    "PeerRef",
    "is_safe_integer",
    "to_safe_integer",
]
