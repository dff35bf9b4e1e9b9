"""
API server package — HTTP interface over the trust assessor.

Exposes reasoning-trust assessments for wallets as JSON. No authentication
or rate limiting; every request performs one live conviction lookup.
"""
