"""mwgen — middleware generator for Go interfaces.

Reflects a Go interface with tree-sitter and synthesizes a wrapper
type that weaves logging or tracing around every delegated call.
"""

__version__ = "0.1.0"
