"""Infrastructure layer: precompiled matchers."""
