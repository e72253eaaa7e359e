"""
Cordelia — chord identification and key estimation.

Packages:
    cordelia.core        pure engine (pitch model, chord dictionary, matcher,
                         chord-name parser, key estimator)
    cordelia.tools       MusicalTool wrappers + registry
    cordelia.api         FastAPI application
    cordelia.cli         ``cordelia`` command-line entry point
"""

__version__ = "0.4.0"
