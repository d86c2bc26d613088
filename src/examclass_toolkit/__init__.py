"""Top-level package for the exam-class toolkit.

Provides subpackages:
- examclass_toolkit.common – depth/role resolver and attribute normalizer
- examclass_toolkit.core – Pandoc document model, validation, serialization
- examclass_toolkit.latex – batch Pandoc filter producing exam-class LaTeX
- examclass_toolkit.editor – interactive structure editing with undo
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text().splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("examclass-toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
