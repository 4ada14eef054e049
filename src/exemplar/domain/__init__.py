"""Domain layer for EXEMPLAR.

Holds the error types raised by the calculator and string utilities. This
package is deliberately free of third-party imports.
"""
