"""
Flooring calculators.

One module per calculator. Each declares a pydantic input model and a pure
compute step; validation always runs first, so formulas only ever see
schema-checked numbers and known option strings.
"""
