"""
Artifact Provenance

Lists GitHub Actions artifacts across a user's repositories and resolves each
artifact back to the workflow run attempt that produced it.
"""

__version__ = "0.1.0"
