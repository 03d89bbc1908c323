"""Application commands: operations that change state."""
