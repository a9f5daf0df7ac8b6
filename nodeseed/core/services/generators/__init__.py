"""
Generators — produce the configuration files of a new project.

Each generator module exposes ``generate_*()`` functions that return
``GeneratedFile`` instances. Content is kept as structured data and
serialized by ``render`` at the end.
"""
