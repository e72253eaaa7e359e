"""
cordelia/tools/ — MusicalTool wrappers around the chord engine.

Tools: identify_chord, estimate_key, list_chord_dictionary.
Use cordelia.tools.registry.get_registry() to look them up by name.
"""
