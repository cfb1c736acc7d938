"""contrast-tool: WCAG 2.0 contrast ratio checker for hex, rgb() and hsl() colours."""

__version__ = '0.1.0'
