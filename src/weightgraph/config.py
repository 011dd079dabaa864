"""
Configuration constants for weightgraph.

Defaults can be overridden through environment variables so callers do not
have to thread options through every call.
"""

import os
from typing import Optional

from weightgraph.exceptions import InvalidArgumentError

# =============================================================================
# Unreachable-node handling
# =============================================================================

# What Dijkstra and Prim-Jarnik do when part of the graph cannot be reached:
#   "raise"   - raise UnreachableNodesError (carries the partial result)
#   "partial" - log a warning and return the partial result
UNREACHABLE_POLICIES = ("raise", "partial")

UNREACHABLE_POLICY = os.getenv("WEIGHTGRAPH_UNREACHABLE_POLICY", "raise").strip().lower()


def resolve_unreachable_policy(value: Optional[str] = None) -> str:
    """Return ``value`` if given, else the configured default, after validation."""
    policy = UNREACHABLE_POLICY if value is None else str(value).strip().lower()
    if policy not in UNREACHABLE_POLICIES:
        raise InvalidArgumentError(
            f"Unknown unreachable policy {value if value is not None else policy!r}; "
            f"expected one of {', '.join(UNREACHABLE_POLICIES)}"
        )
    return policy
