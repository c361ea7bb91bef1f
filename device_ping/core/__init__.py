"""Cross-cutting application services: configuration, security and wiring."""
