"""Task manager backend: owner-scoped task tracking with bearer-token auth."""
