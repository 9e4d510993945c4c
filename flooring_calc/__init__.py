"""Flooring calculator catalog — validated inputs, pure formulas, JSON results."""
