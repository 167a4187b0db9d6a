"""Services that bind search paths to a record type."""
