"""
Core domain models and numeric primitives.

Pure, stateless building blocks: engineering notation with SI prefixes,
GCD/LCM over real operands, and the median of a numeric collection.
"""
