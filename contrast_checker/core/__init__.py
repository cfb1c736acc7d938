"""contrast_checker.core: Foundation layer.

Contains the colour types, luminance maths, report builder, tokenizer,
environment loading and swatch rendering.
This module has NO dependencies on contrast_checker.notations or contrast_checker.registry.
Only stdlib and PIL are allowed here.
"""
