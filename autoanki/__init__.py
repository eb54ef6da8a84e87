"""Save LDOCE dictionary entries to AnkiWeb as flashcard notes.

Subpackages:
- autoanki.common: Shared utilities (config, logging, errors, http transport)
- autoanki.schema: Entry model for parsed dictionary lookups
- autoanki.input: Fetching and extracting entries from LDOCE pages
- autoanki.output: Encoding notes and submitting them to AnkiWeb
"""

__version__ = "0.1.0"
