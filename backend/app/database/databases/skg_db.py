"""
Secret key database configuration.
Stores user accounts and their secret keys.
"""


class Collections:
    """Collection names in skg_db."""
    USERS = "users"
    SECRET_KEYS = "secret_keys"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("username", 1)], "unique": True},
            {"keys": [("createdAt", -1)]},
        ],
        "secret_keys": [
            {"keys": [("userId", 1)]},
        ],
    }
