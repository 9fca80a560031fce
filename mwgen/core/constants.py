"""Shared constants for mwgen.

Names and defaults used across the reflector, the aspect strategies
and the CLI, kept in one place to avoid duplication.
"""

# =============================================================================
# Go conventions
# =============================================================================

# Parameter name treated as the request context
CONTEXT_PARAM = "ctx"

# Return type that receives the `err` binding
ERROR_TYPE = "error"

# Go source file suffix
GO_FILE_SUFFIX = ".go"

# Module definition file used to derive import paths
GO_MOD_FILE = "go.mod"

# =============================================================================
# Output defaults
# =============================================================================

# Output subdirectory, relative to the module directory
DEFAULT_OUTPUT_DIR = "middleware"

# Value of the "layer" field in structured log events
DEFAULT_LAYER = "service"

# Default config file looked up inside the module directory
DEFAULT_CONFIG_FILE = ".mwgen.yaml"

# Environment variable naming a config file
CONFIG_ENV_VAR = "MWGEN_CONFIG"

# Header marking generated files
GENERATED_HEADER = "// Code generated by mwgen. DO NOT EDIT."

# =============================================================================
# Return arity policies
# =============================================================================

NARY_CAPTURE = "capture"
NARY_REJECT = "reject"
NARY_POLICIES = (NARY_CAPTURE, NARY_REJECT)

# =============================================================================
# Go identifiers that never take a package qualifier
# =============================================================================

PREDECLARED_TYPES = frozenset({
    "any", "bool", "byte", "comparable", "error", "rune", "string", "uintptr",
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64",
    "float32", "float64", "complex64", "complex128",
})

TYPE_KEYWORDS = frozenset({"chan", "func", "interface", "map", "struct"})
