"""Core helpers of CredKDF: errors, digests and text encodings."""
