"""Single-use Discord verification tokens over HTTP."""
