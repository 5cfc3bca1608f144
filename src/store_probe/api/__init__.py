"""HTTP wiring: application factory, routes, middleware and dependencies."""
