"""
Service layer abstraction.

``entry_store`` owns the in-memory collection, ``validation`` decides
whether a candidate entry may be committed, ``query_service`` computes
read-only views and ``bloodbank_service`` ties them together for the
API handlers.
"""
