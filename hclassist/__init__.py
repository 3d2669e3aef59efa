"""Helpers for HCL editor tooling: source ranges, node trees, markdown cleanup and paths."""

__version__ = "0.1.0"
__all__ = ["geometry", "hcl_node", "mdplain", "pathcmp", "pathtpl"]