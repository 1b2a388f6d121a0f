"""Export utilities for profiles and rendered cards."""

from pathlib import Path

from hrcard.models.profile import ProfileData


def to_json(profile: ProfileData, indent: int = 2) -> str:
    """
    Convert ProfileData to JSON string.

    Args:
        profile: ProfileData to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return profile.model_dump_json(indent=indent)


def to_dict(profile: ProfileData) -> dict:
    """Convert ProfileData to a JSON-compatible dictionary."""
    return profile.model_dump(mode="json")


def save_json(profile: ProfileData, filepath: str | Path, indent: int = 2) -> Path:
    """
    Save ProfileData to JSON file.

    Args:
        profile: ProfileData to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(profile, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> ProfileData:
    """Load ProfileData from JSON file."""
    path = Path(filepath)
    return ProfileData.model_validate_json(path.read_text(encoding="utf-8"))


def save_svg(markup: str, filepath: str | Path) -> Path:
    """
    Write rendered card markup to a file.

    Args:
        markup: SVG document
        filepath: Output file path

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markup, encoding="utf-8")
    return path
