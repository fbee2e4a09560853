"""go-app-gen -- scaffolds Go services from bundled templates.

The heavy lifting lives in :mod:`goappgen.scaffolder`; this package also
carries the runtime settings, console helpers and the command-line entry
point.
"""

__version__ = "0.1.0"
