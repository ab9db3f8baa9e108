"""Services Layer - the invite registry orchestrating core logic around storage IO."""
