"""
Seam Convert - JSON body conversion for the Seam RPC client

Translates between wire-format JSON payloads and in-memory typed objects:

1. Typed bodies: TypedInput / TypedOutput pair a byte payload with its MIME type
2. Engines: pluggable structural mapping (pydantic models, protobuf messages)
3. Converter: JsonConverter turns objects into request bodies and response bodies into objects

The converter performs no I/O of its own; the transport layer owns the wire.
"""

__version__ = "0.1.0"
