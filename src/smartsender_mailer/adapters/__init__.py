"""Adapters – HTTP transport and the SmartSender provider."""
