"""HTTP server exposing the richdoc renderer."""
