"""Tag handlers registered by the AsciiDoc converter."""
