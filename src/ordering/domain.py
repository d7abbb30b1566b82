"""Ordering bounded context — Shopping Cart and Orders.

Holds the session-owned shopping cart (a pure reducer behind a key-value
persisted store) and the order flow that snapshots a cart plus checkout
details into an immutable Order for invoice display.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
