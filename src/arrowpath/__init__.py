"""Rounded-corner arrow paths with arc-length based partial rendering."""
