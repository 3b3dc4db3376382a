"""Static, versioned rule tables for the recommendation engine.

Bump ``RULES_VERSION`` whenever an item, threshold or destination entry changes so
cached or persisted recommendation payloads can be told apart.
"""

RULES_VERSION = "2024.1"
