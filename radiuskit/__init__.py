"""RADIUS packets, attribute values, an asyncio client, dictionaries and dumps."""

__version__ = "0.1.0"