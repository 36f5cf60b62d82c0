"""
Persistence adapters.

``json_storage`` owns the single JSON document on disk and its locking; the
entity repositories are typed views over it. Services depend on the
repositories rather than touching the JSON file.
"""
