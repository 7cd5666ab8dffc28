"""
This package contains everything needed to turn raw IPP bytes into a typed
message tree.

Sub-packages handle each layer of the wire format:

- ``message``: Header and attribute-group decoding.
- ``attributes``: Attribute records, continuation values and collections.
- ``values``: Typed value model and per-tag value decoding.

Tag constants live in ``tags``.
"""
