"""Client-side password key derivation and credential encoding for CredKDF."""
