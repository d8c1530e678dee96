from pathlib import Path


def ensure_directory_exists(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def save_text_file(text: str, filepath: Path) -> Path:
    filepath = Path(filepath)
    ensure_directory_exists(filepath.parent)
    filepath.write_text(text, encoding="utf-8")
    return filepath
