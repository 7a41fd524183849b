"""Design Patterns Catalog - Root Package.

This package provides small, self-contained demonstrations of classical
object-oriented design patterns, each exercised once by a driver that writes
human-readable lines to an output sink.

Key Components:
    - domain: The pattern implementations (creational, structural, behavioral)
    - application: Demonstration drivers and the demo registry
    - infrastructure: Logging and dependency injection
    - config: Configuration schemas and loading
    - cli: Command-line interface

Usage:
    >>> python -m design_patterns list
    >>> python -m design_patterns run state
"""

__version__ = "1.0.0"
PACKAGE_NAME = "design-patterns-catalog"

__author__ = "Design Patterns Catalog Contributors"
__package_name__ = PACKAGE_NAME
