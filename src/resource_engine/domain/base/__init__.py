"""Base domain building blocks shared by every layer."""
