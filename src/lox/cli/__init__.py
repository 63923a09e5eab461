"""
Lox Command-Line Interface
==========================

This package provides the command-line tool for the Lox scanner:

- **rlox**: scan a script file, or lines typed at an interactive prompt,
  and print the resulting tokens

The tool is implemented as a Click application.
"""
