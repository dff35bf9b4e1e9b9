"""
Core utilities — exceptions and cross-cutting concerns.

Defines the Conviction Source error taxonomy shared by the source
implementations and the trust assessor.
"""
