"""Firestore collection names the functions read or are triggered by."""

COLLECTION_USERS = "users"
COLLECTION_PROFILES = "profiles"
