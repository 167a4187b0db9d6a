"""Path descriptors and match records."""
