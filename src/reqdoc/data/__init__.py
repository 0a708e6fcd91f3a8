"""Bundled data files."""

from importlib.resources import files

DEMO_RESOURCE = "requirements.yml"


def demo_text() -> str:
    """Return the bundled demo document (YAML source)."""
    return files(__name__).joinpath(DEMO_RESOURCE).read_text(encoding="utf-8")


def demo_document():
    """Load the bundled demo document."""
    from reqdoc.core.loader import load_document

    return load_document(demo_text(), fmt="yaml", source=DEMO_RESOURCE)
