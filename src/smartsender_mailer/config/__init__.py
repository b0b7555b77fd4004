"""Config – environment based settings and their validation errors."""
