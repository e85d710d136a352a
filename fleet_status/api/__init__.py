"""HTTP surface for fleet status queries."""
