"""Codecs between in-memory values and their textual/binary representations.

Modules:
- ``binary``: bytes to/from hex, Base64, gzip, UTF-8 text and JSON objects.
- ``mappings``: string-keyed mappings to JSON and query strings, merging.
- ``records``: dataclasses/mappings to JSON, Plist, Base64 and files.

Encode/decode failures on these paths are an expected "no answer" and come
back as `None` (or the documented placeholder), not as exceptions.
"""
