"""
Byte stores: named text resources read and written whole.

Defines the ByteStore protocol and its filesystem, in-memory and HTTP
implementations, plus a factory that picks one from settings.
"""
