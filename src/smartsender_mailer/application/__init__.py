"""Application layer – provider-agnostic email contracts and dispatch flow."""
