"""Domain-level policies and business rules.

This package contains logic that defines *what* the catalog rules are
(identifier formats, borrow state, digest wording), independent from
*where* they are applied (services, stores, notifiers).
"""
