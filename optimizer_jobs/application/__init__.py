"""Application layer: services coordinating the boundary and core layers."""
