"""Binary trees of integers: nodes, traversals, measures, text drawing and examples."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "measures", "render", "demo"]