"""In-memory chunked column store with dictionary compression and scan operators."""

__version__ = "0.1.0"
__all__ = [
    "utils",
    "types",
    "variant",
    "value_segment",
    "attribute_vector",
    "dictionary_segment",
    "reference_segment",
    "chunk",
    "table",
    "storage_manager",
    "operators",
    "print_operator",
    "table_scan",
]