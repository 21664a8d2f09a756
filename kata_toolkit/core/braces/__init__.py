"""Brace expansion engine.

Shell-style alternation: ``a{b,c}d`` expands to ``abd`` and ``acd``. Groups
may nest, and every group in the pattern contributes one choice per result.
"""
