import shutil
from pathlib import Path


def clean_directory(directory: Path):
    """
    Creates the directory if needed and removes everything inside it,
    including sub folders such as pytest-html's assets/.
    Entries that cannot be removed are reported and skipped.
    """
    directory.mkdir(parents=True, exist_ok=True)

    for entry in directory.iterdir():
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {entry}: {e}")
