"""
Storefront Checkout

In-memory retail checkout: products with optional expiry and shipping
weight, a per-customer cart, and an order checkout that validates, prices,
debits, decrements stock and dispatches shippable units.
"""

__version__ = "1.0.0"
